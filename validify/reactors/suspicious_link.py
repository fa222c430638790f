"""Alerts on messages with suspicious links or scam keywords."""
from typing import Optional

import discord

from ..alerting.alerts import Alert
from ..alerting.formatter import format_suspicious_link
from ..alerting.heuristics import LinkScanner
from ..alerting.manager import AlertDispatcher
from ..audit.lookup import AuditLookup
from ..audit.records import SuspiciousLinkRecord
from ..core.config import AlertConfig
from .base import Reactor


class SuspiciousLinkReactor(Reactor):
    """
    Reacts to guild messages from human authors.

    A message is reported when any linked domain is suspicious (and not
    allowlisted) or when the text contains a suspicious keyword. The
    record lists every extracted URL, not only the flagged ones.
    """

    name = "Link"

    def __init__(
        self,
        config: AlertConfig,
        dispatcher: AlertDispatcher,
        lookup: Optional[AuditLookup] = None,
    ):
        super().__init__(config, dispatcher, lookup)
        self.scanner = LinkScanner(config)

    @property
    def enabled(self) -> bool:
        return self.config.enable_link_alerts

    async def on_message(self, message: discord.Message) -> Optional[Alert]:
        if not self.enabled or message.guild is None or message.author.bot:
            return None
        return await self._guarded(self._react(message))

    async def _react(self, message: discord.Message) -> Optional[Alert]:
        scan = self.scanner.scan(message.content)
        if not scan.should_alert:
            return None

        alert_channel = self.dispatcher.resolve_channel(message.guild)
        if alert_channel is None:
            return None

        alert = format_suspicious_link(
            author_tag=str(message.author),
            channel_name=getattr(message.channel, "name", None),
            hits=scan.hits,
            keyword_flag=scan.keyword_flag,
        )
        record = SuspiciousLinkRecord(
            guild_id=message.guild.id,
            channel_id=message.channel.id,
            user_id=message.author.id,
            keyword_flag=scan.keyword_flag,
            urls=tuple(scan.urls),
        )

        if await self.dispatcher.dispatch(alert_channel, alert, record):
            return alert
        return None
