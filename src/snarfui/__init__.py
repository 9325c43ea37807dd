"""SnarfUI: declarative, reactive widget construction for Python widget toolkits."""

from importlib.metadata import version as _version

__version__ = _version("snarfui")

from snarfui.binding import Binding, Derived, Variable, bind, is_binding
from snarfui.config import Config, configure, get_config, reset_config
from snarfui.construct import construct
from snarfui.containers import Bin, CenterSlots, Container, OrderedBox, OverlayBox, set_children
from snarfui.errors import CommandError, PropertySetError, SnarfUIError, UnsupportedContainerError
from snarfui.hook import EventSource, ValueSource, hook
from snarfui.merge import merge_bindings
from snarfui.props import set_property
from snarfui.scheduler import set_scheduler
from snarfui.signals import SignalEmitter
from snarfui.toolkit import Toolkit
from snarfui.widget import ReactiveWidget, WidgetFactory, augment
# textual NOT auto-imported, opt-in only

__all__ = [
    "Variable",
    "Derived",
    "Binding",
    "bind",
    "is_binding",
    "Config",
    "configure",
    "get_config",
    "reset_config",
    "construct",
    "Container",
    "Bin",
    "OrderedBox",
    "CenterSlots",
    "OverlayBox",
    "set_children",
    "SnarfUIError",
    "PropertySetError",
    "UnsupportedContainerError",
    "CommandError",
    "EventSource",
    "ValueSource",
    "hook",
    "merge_bindings",
    "set_property",
    "set_scheduler",
    "SignalEmitter",
    "Toolkit",
    "ReactiveWidget",
    "WidgetFactory",
    "augment",
]
