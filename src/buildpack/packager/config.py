"""Runtime configuration for the packager, resolved once at startup."""

from collections.abc import Mapping
import os

from attrs import define
from pyvider.telemetry import LoggingConfig, TelemetryConfig, setup_telemetry

DEBUG_ENV_VAR = "BP_DEBUG"


@define(frozen=True, slots=True)
class PackagerConfig:
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PackagerConfig":
        """Builds a config from the environment. `BP_DEBUG` counts when set at all."""
        env = os.environ if environ is None else environ
        return cls(debug=DEBUG_ENV_VAR in env)


def configure_logging(config: PackagerConfig) -> None:
    """Routes structured diagnostics to stderr only when debugging is enabled."""
    setup_telemetry(
        TelemetryConfig(
            service_name="bppackage",
            logging=LoggingConfig(default_level="DEBUG"),
            globally_disabled=not config.debug,
        )
    )
