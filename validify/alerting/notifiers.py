"""
Notification channels for the alerting system.

Notifiers are responsible for delivering alerts to a destination.
"""

import abc
import logging
from typing import Any

import discord

from .alerts import Alert

logger = logging.getLogger(__name__)


class BaseNotifier(abc.ABC):
    """Abstract base class for all notifiers."""

    @abc.abstractmethod
    async def notify(self, channel: Any, alert: Alert) -> bool:
        """
        Send notification for an alert.

        Args:
            channel: The resolved alert channel
            alert: The alert to deliver

        Returns:
            True if notification was successful, False otherwise
        """
        pass


class ChannelNotifier(BaseNotifier):
    """Posts alerts as embeds to a Discord text channel."""

    async def notify(self, channel: Any, alert: Alert) -> bool:
        try:
            await channel.send(embed=alert.to_embed())
        except discord.HTTPException as e:
            logger.error(f"Failed to send {alert.category.name} alert to channel {channel.id}: {e}")
            return False
        return True


class ConsoleNotifier(BaseNotifier):
    """
    Logs alerts instead of posting them.

    Used in dry-run mode, when the bot should observe without writing to
    the guild.
    """

    async def notify(self, channel: Any, alert: Alert) -> bool:
        destination = getattr(channel, "id", None)
        logger.warning(f"[ALERT:{alert.category.name}] -> {destination} {alert.title}\n{alert.description}")
        return True


__all__ = [
    "BaseNotifier",
    "ChannelNotifier",
    "ConsoleNotifier",
]
