"""Tests for configuration."""

import dataclasses

import pytest

from snarfui import Config, configure, get_config, reset_config


class TestConfig:
    def test_defaults(self):
        cfg = get_config()
        assert cfg.event_prefix == "on_"
        assert cfg.setup_key == "setup"
        assert cfg.child_keys == {"child", "children"}
        assert cfg.default_visible is True
        assert cfg.strict_containers is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_config().event_prefix = "x"

    def test_configure_replaces(self):
        before = get_config()
        after = configure(strict_containers=True)
        assert get_config() is after
        assert after.strict_containers is True
        assert before.strict_containers is False

    def test_unknown_key(self):
        with pytest.raises(TypeError):
            configure(nope=1)

    def test_reset(self):
        configure(default_visible=False)
        reset_config()
        assert get_config() == Config()

    def test_default_visible_false(self):
        from fakes import Widget

        configure(default_visible=False)
        assert Widget().visible is False
