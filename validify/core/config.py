"""Configuration for Validify Sentinel.

Two layers:
- Settings: process settings from the environment (and `.env`).
- AlertConfig: the static alert document (`config.json`), loaded once at
  startup and passed explicitly to every component that needs it.

A missing or malformed alert document never stops the process. Each bad
field falls back to its disabled/empty default and is reported as a warning.
"""
import json
import logging
from pathlib import Path
from typing import Any, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process settings loaded from environment."""

    # Platform secret, kept under its conventional name (no prefix)
    discord_bot_token: Optional[str] = Field(default=None, validation_alias="DISCORD_BOT_TOKEN")

    config_path: Path = Path("config.json")
    log_file: Path = Path("validify-log.json")
    log_level: str = "INFO"

    # Write alerts to the operational log instead of Discord
    dry_run: bool = False

    model_config = SettingsConfigDict(
        env_prefix="VALIDIFY_",
        env_file=".env",
        extra="ignore",
    )


class AlertConfig(BaseModel):
    """
    The alert document.

    Attributes:
        alert_channel_id: Channel that receives alerts (ALERT_CHANNEL_ID)
        enable_bot_add_alerts: Bot-added reactor toggle
        enable_role_alerts: Role-change reactor toggle
        enable_webhook_alerts: Webhook-created reactor toggle
        enable_link_alerts: Suspicious-link reactor toggle
        allowlist_domains: Domain suffixes always treated as safe
        suspicious_domains: Hostname substrings that flag a link
        suspicious_keywords: Message substrings that flag a message
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    alert_channel_id: Optional[int] = Field(default=None, alias="ALERT_CHANNEL_ID")
    enable_bot_add_alerts: bool = Field(default=False, alias="ENABLE_BOT_ADD_ALERTS")
    enable_role_alerts: bool = Field(default=False, alias="ENABLE_ROLE_ALERTS")
    enable_webhook_alerts: bool = Field(default=False, alias="ENABLE_WEBHOOK_ALERTS")
    enable_link_alerts: bool = Field(default=False, alias="ENABLE_LINK_ALERTS")
    allowlist_domains: FrozenSet[str] = Field(default_factory=frozenset, alias="ALLOWLIST_DOMAINS")
    suspicious_domains: FrozenSet[str] = Field(default_factory=frozenset, alias="SUSPICIOUS_DOMAINS")
    suspicious_keywords: FrozenSet[str] = Field(default_factory=frozenset, alias="SUSPICIOUS_KEYWORDS")

    @field_validator("alert_channel_id", mode="before")
    @classmethod
    def _coerce_channel_id(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        logger.warning(f"ALERT_CHANNEL_ID is not a channel id ({value!r}); alerts have no destination")
        return None

    @field_validator(
        "enable_bot_add_alerts",
        "enable_role_alerts",
        "enable_webhook_alerts",
        "enable_link_alerts",
        mode="before",
    )
    @classmethod
    def _coerce_toggle(cls, value: Any, info: ValidationInfo) -> bool:
        if isinstance(value, bool):
            return value
        if value is not None:
            logger.warning(f"{info.field_name.upper()} is not a boolean ({value!r}); feature disabled")
        return False

    @field_validator(
        "allowlist_domains",
        "suspicious_domains",
        "suspicious_keywords",
        mode="before",
    )
    @classmethod
    def _coerce_patterns(cls, value: Any, info: ValidationInfo) -> FrozenSet[str]:
        if value is None:
            return frozenset()
        if not isinstance(value, (list, tuple, set, frozenset)):
            logger.warning(f"{info.field_name.upper()} is not a list ({value!r}); treated as empty")
            return frozenset()

        cleaned = set()
        for item in value:
            if not isinstance(item, str):
                logger.warning(f"Dropping non-string entry {item!r} from {info.field_name.upper()}")
                continue
            item = item.strip().lower()
            # An empty pattern would match everything
            if item:
                cleaned.add(item)
        return frozenset(cleaned)


def load_alert_config(path: Path) -> AlertConfig:
    """
    Load the alert document from a JSON file.

    Args:
        path: Location of the JSON document

    Returns:
        The parsed AlertConfig. An absent, unreadable or non-object
        document yields the all-disabled default.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Alert config {path} not found; all alerts disabled")
        return AlertConfig()
    except (OSError, ValueError) as e:
        logger.warning(f"Alert config {path} could not be read ({e}); all alerts disabled")
        return AlertConfig()

    if not isinstance(data, dict):
        logger.warning(f"Alert config {path} is not a JSON object; all alerts disabled")
        return AlertConfig()

    return AlertConfig.model_validate(data)


__all__ = ["Settings", "AlertConfig", "load_alert_config"]
