"""Alerts when a webhook is created."""
import logging
from typing import Any, Optional

import discord

from ..alerting.alerts import Alert
from ..alerting.formatter import format_webhook_created
from ..audit.lookup import LookupResult, LookupStatus
from ..audit.records import WebhookCreatedRecord
from .base import Reactor

logger = logging.getLogger(__name__)


def _entry_channel_id(result: LookupResult) -> Optional[int]:
    """Channel the audited webhook was created in, when the entry says."""
    channel = getattr(result.entry.after, "channel", None)
    if channel is not None:
        return getattr(channel, "id", None)
    return getattr(result.target, "channel_id", None)


class WebhookCreatedReactor(Reactor):
    """
    Reacts to the webhooks-update signal.

    Discord sends this signal for any webhook change in a channel, so the
    latest webhook_create audit entry is the only evidence a webhook was
    actually created. No entry means the signal was about something else
    and nothing is reported. An entry that names a different channel than
    the signal's belongs to another event and is ignored as well.
    """

    name = "Webhook"

    @property
    def enabled(self) -> bool:
        return self.config.enable_webhook_alerts

    async def on_webhooks_update(self, channel: discord.abc.GuildChannel) -> Optional[Alert]:
        if not self.enabled:
            return None
        return await self._guarded(self._react(channel))

    async def _react(self, channel: Any) -> Optional[Alert]:
        guild = channel.guild
        alert_channel = self.dispatcher.resolve_channel(guild)
        if alert_channel is None:
            return None

        result = await self.lookup.latest(guild, discord.AuditLogAction.webhook_create)
        if not result.found:
            if result.status is LookupStatus.FAILED:
                logger.warning(f"Webhook update in channel {channel.id} not reported: audit lookup failed")
            return None

        created_in = _entry_channel_id(result)
        if created_in is not None and created_in != channel.id:
            logger.debug(
                f"Latest webhook_create is for channel {created_in}, not {channel.id}; ignoring signal"
            )
            return None

        webhook_name = getattr(result.target, "name", None)
        alert = format_webhook_created(
            channel_name=getattr(channel, "name", None),
            created_by=result.actor_tag,
            webhook_name=webhook_name,
        )
        record = WebhookCreatedRecord(
            guild_id=guild.id,
            channel_id=channel.id,
            created_by=result.actor_id,
            webhook_name=webhook_name,
        )

        if await self.dispatcher.dispatch(alert_channel, alert, record):
            return alert
        return None
