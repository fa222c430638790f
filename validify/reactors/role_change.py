"""Alerts when a role's name or permissions change."""
import logging
from typing import Optional

import discord

from ..alerting.alerts import Alert
from ..alerting.formatter import format_role_updated
from ..audit.lookup import LookupStatus
from ..audit.records import RoleUpdatedRecord
from .base import Reactor

logger = logging.getLogger(__name__)


class RoleChangeReactor(Reactor):
    """
    Reacts to role updates.

    Only name changes and permission bitmask changes are reported; other
    edits (color, position, hoist) are ignored.
    """

    name = "Role update"

    @property
    def enabled(self) -> bool:
        return self.config.enable_role_alerts

    async def on_role_update(self, before: discord.Role, after: discord.Role) -> Optional[Alert]:
        if not self.enabled:
            return None
        return await self._guarded(self._react(before, after))

    async def _react(self, before: discord.Role, after: discord.Role) -> Optional[Alert]:
        name_changed = before.name != after.name
        perms_changed = before.permissions.value != after.permissions.value
        if not name_changed and not perms_changed:
            return None

        guild = after.guild
        channel = self.dispatcher.resolve_channel(guild)
        if channel is None:
            return None

        result = await self.lookup.latest(guild, discord.AuditLogAction.role_update)
        if result.status is LookupStatus.FAILED:
            logger.info(f"Could not resolve who changed role {after.id}; reporting as Unknown")

        alert = format_role_updated(
            old_name=before.name,
            new_name=after.name,
            perms_changed=perms_changed,
            changed_by=result.actor_tag,
        )
        record = RoleUpdatedRecord(
            guild_id=guild.id,
            role_id=after.id,
            changed_by=result.actor_id,
            name_changed=name_changed,
            perms_changed=perms_changed,
        )

        if await self.dispatcher.dispatch(channel, alert, record):
            return alert
        return None
