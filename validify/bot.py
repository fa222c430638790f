"""Discord client wiring gateway events to the reactors."""
import logging
import sys
from typing import Optional

import discord

from .alerting.manager import AlertDispatcher
from .alerting.notifiers import BaseNotifier, ChannelNotifier, ConsoleNotifier
from .audit.lookup import AuditLookup
from .audit.store import EventLogStore
from .core.config import AlertConfig, Settings, load_alert_config
from .core.logging import configure_logging
from .reactors import (
    BotAddedReactor,
    RoleChangeReactor,
    SuspiciousLinkReactor,
    WebhookCreatedReactor,
)

logger = logging.getLogger(__name__)


def build_intents() -> discord.Intents:
    """Gateway intents for members, messages, webhooks and audit access."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.members = True
    intents.guild_messages = True
    intents.message_content = True
    intents.webhooks = True
    intents.moderation = True
    return intents


class SentinelBot(discord.Client):
    """
    Discord client that forwards events to the alert reactors.

    The reactors share one dispatcher (and so one log store) and one
    read-only AlertConfig.
    """

    def __init__(
        self,
        config: AlertConfig,
        dispatcher: AlertDispatcher,
        lookup: Optional[AuditLookup] = None,
        intents: Optional[discord.Intents] = None,
    ):
        super().__init__(intents=intents or build_intents())
        self.config = config
        self.dispatcher = dispatcher
        lookup = lookup or AuditLookup()

        self.bot_added = BotAddedReactor(config, dispatcher, lookup)
        self.role_change = RoleChangeReactor(config, dispatcher, lookup)
        self.webhook_created = WebhookCreatedReactor(config, dispatcher, lookup)
        self.suspicious_link = SuspiciousLinkReactor(config, dispatcher, lookup)

    async def on_ready(self) -> None:
        logger.info(f"Validify Sentinel online as {self.user}")
        if self.config.alert_channel_id is None:
            logger.warning("ALERT_CHANNEL_ID is not set; no alerts will be posted")

    async def on_member_join(self, member: discord.Member) -> None:
        await self.bot_added.on_member_join(member)

    async def on_guild_role_update(self, before: discord.Role, after: discord.Role) -> None:
        await self.role_change.on_role_update(before, after)

    async def on_webhooks_update(self, channel: discord.abc.GuildChannel) -> None:
        await self.webhook_created.on_webhooks_update(channel)

    async def on_message(self, message: discord.Message) -> None:
        await self.suspicious_link.on_message(message)


def build_bot(settings: Settings, config: Optional[AlertConfig] = None) -> SentinelBot:
    """
    Assemble the bot from settings.

    Args:
        settings: Process settings
        config: Alert configuration; loaded from settings.config_path if omitted

    Returns:
        A SentinelBot ready to run
    """
    if config is None:
        config = load_alert_config(settings.config_path)

    notifier: BaseNotifier = ConsoleNotifier() if settings.dry_run else ChannelNotifier()
    dispatcher = AlertDispatcher(
        config=config,
        notifier=notifier,
        store=EventLogStore(settings.log_file),
    )
    return SentinelBot(config, dispatcher)


def main() -> int:
    """Run the bot until the gateway connection closes."""
    settings = Settings()
    configure_logging(settings.log_level)

    if not settings.discord_bot_token:
        logger.error("DISCORD_BOT_TOKEN is not set; cannot log in")
        return 1

    bot = build_bot(settings)
    if settings.dry_run:
        logger.info("Dry run: alerts will be written to the log only")

    # Logging is already configured; keep discord.py from adding a handler
    bot.run(settings.discord_bot_token, log_handler=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
