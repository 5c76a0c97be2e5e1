"""Tests for startup configuration."""

from unittest.mock import patch

from buildpack.packager.config import PackagerConfig, configure_logging


def test_debug_disabled_by_default() -> None:
    assert PackagerConfig.from_env({}).debug is False


def test_debug_enabled_by_any_value() -> None:
    assert PackagerConfig.from_env({"BP_DEBUG": ""}).debug is True
    assert PackagerConfig.from_env({"BP_DEBUG": "false"}).debug is True


def test_configure_logging_follows_debug_flag() -> None:
    with patch("buildpack.packager.config.setup_telemetry") as mock_setup:
        configure_logging(PackagerConfig(debug=False))
        configure_logging(PackagerConfig(debug=True))

    quiet, verbose = (call.args[0] for call in mock_setup.call_args_list)
    assert quiet.globally_disabled is True
    assert verbose.globally_disabled is False
    assert verbose.logging.default_level == "DEBUG"
