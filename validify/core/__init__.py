"""Core modules for Validify Sentinel."""
from .config import AlertConfig, Settings, load_alert_config
from .logging import configure_logging

__all__ = [
    "AlertConfig",
    "Settings",
    "load_alert_config",
    "configure_logging",
]
