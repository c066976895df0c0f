"""Runtime services (telemetry, environment configuration)."""

from . import telemetry

__all__ = ["telemetry"]
