from .telemetry import setup_logging, setup_telemetry, traced

__all__ = ["setup_logging", "setup_telemetry", "traced"]
