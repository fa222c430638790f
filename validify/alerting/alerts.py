"""
Core alert data structures for the alerting system.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

import discord


class AlertCategory(Enum):
    """Alert categories, each with a fixed title and accent color."""
    BOT_ADDED = ("Bot Added Alert", 0x00D4FF)
    ROLE_UPDATED = ("Role Change Alert", 0x00FF88)
    WEBHOOK_CREATED = ("Webhook Alert", 0xFFAA00)
    SUSPICIOUS_LINK = ("Suspicious Link Alert", 0xFF4444)

    def __init__(self, title: str, color: int):
        self.title = title
        self.color = color


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Alert:
    """
    A formatted notification ready for delivery.

    Attributes:
        category: Which reactor produced the alert
        title: Embed title
        description: Multi-line markdown body
        color: Embed accent color
        timestamp: When the alert was formatted (UTC)
    """
    category: AlertCategory
    title: str
    description: str
    color: int
    timestamp: datetime = field(default_factory=_utcnow)

    def to_embed(self) -> discord.Embed:
        """Render the alert as a Discord embed."""
        return discord.Embed(
            title=self.title,
            description=self.description,
            color=self.color,
            timestamp=self.timestamp,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the alert to a dictionary."""
        return {
            "category": self.category.name,
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "timestamp": self.timestamp.isoformat(),
        }


__all__ = ["Alert", "AlertCategory"]
