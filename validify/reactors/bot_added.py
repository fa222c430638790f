"""Alerts when a bot account joins a guild."""
import logging
from typing import Optional

import discord

from ..alerting.alerts import Alert
from ..alerting.formatter import format_bot_added
from ..audit.lookup import LookupStatus
from ..audit.records import BotAddedRecord
from .base import Reactor

logger = logging.getLogger(__name__)


class BotAddedReactor(Reactor):
    """
    Reacts to member joins, filtered to bot accounts.

    Every qualifying join produces one alert and one record. The adding
    user comes from the latest bot_add audit entry, or "Unknown".
    """

    name = "Bot add"

    @property
    def enabled(self) -> bool:
        return self.config.enable_bot_add_alerts

    async def on_member_join(self, member: discord.Member) -> Optional[Alert]:
        if not self.enabled or not member.bot:
            return None
        return await self._guarded(self._react(member))

    async def _react(self, member: discord.Member) -> Optional[Alert]:
        guild = member.guild
        channel = self.dispatcher.resolve_channel(guild)
        if channel is None:
            return None

        result = await self.lookup.latest(guild, discord.AuditLogAction.bot_add)
        if result.status is LookupStatus.FAILED:
            logger.info(f"Could not resolve who added bot {member.id}; reporting as Unknown")

        alert = format_bot_added(
            bot_tag=str(member),
            bot_id=member.id,
            added_by=result.actor_tag,
        )
        record = BotAddedRecord(
            guild_id=guild.id,
            bot_id=member.id,
            added_by=result.actor_id,
        )

        if await self.dispatcher.dispatch(channel, alert, record):
            return alert
        return None
