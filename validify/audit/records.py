"""Alert event records appended to the audit log."""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple


def _snowflake(value: Optional[int]) -> Optional[str]:
    # Discord ids exceed the range JSON readers can hold exactly as numbers
    return str(value) if value is not None else None


@dataclass(frozen=True)
class AlertRecord:
    """Base record: one alert event in a guild."""
    kind: ClassVar[str] = ""

    guild_id: int

    def fields(self) -> Dict[str, Any]:
        """Category-specific fields, keyed as they appear in the log."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the log format (`ts` is added by the store)."""
        return {"type": self.kind, "guildId": _snowflake(self.guild_id), **self.fields()}


@dataclass(frozen=True)
class BotAddedRecord(AlertRecord):
    kind: ClassVar[str] = "BOT_ADDED"

    bot_id: int = 0
    added_by: Optional[int] = None

    def fields(self) -> Dict[str, Any]:
        return {
            "botId": _snowflake(self.bot_id),
            "addedBy": _snowflake(self.added_by),
        }


@dataclass(frozen=True)
class RoleUpdatedRecord(AlertRecord):
    kind: ClassVar[str] = "ROLE_UPDATED"

    role_id: int = 0
    changed_by: Optional[int] = None
    name_changed: bool = False
    perms_changed: bool = False

    def fields(self) -> Dict[str, Any]:
        return {
            "roleId": _snowflake(self.role_id),
            "changedBy": _snowflake(self.changed_by),
            "nameChanged": self.name_changed,
            "permsChanged": self.perms_changed,
        }


@dataclass(frozen=True)
class WebhookCreatedRecord(AlertRecord):
    kind: ClassVar[str] = "WEBHOOK_CREATED"

    channel_id: Optional[int] = None
    created_by: Optional[int] = None
    webhook_name: Optional[str] = None

    def fields(self) -> Dict[str, Any]:
        return {
            "channelId": _snowflake(self.channel_id),
            "createdBy": _snowflake(self.created_by),
            "webhookName": self.webhook_name,
        }


@dataclass(frozen=True)
class SuspiciousLinkRecord(AlertRecord):
    kind: ClassVar[str] = "SUSPICIOUS_LINK"

    channel_id: Optional[int] = None
    user_id: Optional[int] = None
    keyword_flag: bool = False
    urls: Tuple[str, ...] = field(default_factory=tuple)

    def fields(self) -> Dict[str, Any]:
        return {
            "channelId": _snowflake(self.channel_id),
            "userId": _snowflake(self.user_id),
            "keywordFlag": self.keyword_flag,
            "urls": list(self.urls),
        }


__all__ = [
    "AlertRecord",
    "BotAddedRecord",
    "RoleUpdatedRecord",
    "WebhookCreatedRecord",
    "SuspiciousLinkRecord",
]
