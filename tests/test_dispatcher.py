"""Tests for AlertDispatcher and notifiers."""
import logging
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from validify.alerting import AlertDispatcher, ChannelNotifier, ConsoleNotifier
from validify.alerting.formatter import format_bot_added
from validify.audit.records import BotAddedRecord
from validify.core.config import AlertConfig


def sample():
    return format_bot_added("SpamBot", 42, None), BotAddedRecord(guild_id=1, bot_id=42)


class TestResolveChannel:
    """Test alert channel resolution."""

    def test_configured_channel(self, dispatcher, guild, alert_channel):
        assert dispatcher.resolve_channel(guild) is alert_channel

    def test_unconfigured_channel(self, log_store, guild):
        dispatcher = AlertDispatcher(AlertConfig(), ChannelNotifier(), log_store)

        assert dispatcher.resolve_channel(guild) is None
        guild.get_channel.assert_not_called()

    def test_channel_missing_from_guild(self, log_store, guild):
        dispatcher = AlertDispatcher(AlertConfig(ALERT_CHANNEL_ID=1), ChannelNotifier(), log_store)

        assert dispatcher.resolve_channel(guild) is None


class TestDispatch:
    """Test delivery then logging."""

    @pytest.mark.asyncio
    async def test_delivers_embed_then_logs(self, dispatcher, alert_channel, log_store):
        alert, record = sample()

        assert await dispatcher.dispatch(alert_channel, alert, record) is True

        alert_channel.send.assert_awaited_once()
        embed = alert_channel.send.await_args.kwargs["embed"]
        assert embed.title == "Bot Added Alert"
        assert [r["type"] for r in await log_store.read_all()] == ["BOT_ADDED"]
        assert dispatcher.get_stats()["alerts_sent"] == 1
        assert dispatcher.get_stats()["records_written"] == 1

    @pytest.mark.asyncio
    async def test_failed_send_is_not_logged(self, dispatcher, alert_channel, log_store):
        alert_channel.send = AsyncMock(
            side_effect=discord.HTTPException(MagicMock(status=500, reason="Server Error"), "boom")
        )
        alert, record = sample()

        assert await dispatcher.dispatch(alert_channel, alert, record) is False

        assert await log_store.read_all() == []
        assert dispatcher.get_stats()["delivery_failures"] == 1

    @pytest.mark.asyncio
    async def test_log_failure_does_not_block_delivery(self, dispatcher, alert_channel):
        dispatcher.store = MagicMock()
        dispatcher.store.append = AsyncMock(return_value=False)
        alert, record = sample()

        assert await dispatcher.dispatch(alert_channel, alert, record) is True

        alert_channel.send.assert_awaited_once()
        assert dispatcher.get_stats()["record_failures"] == 1


class TestConsoleNotifier:
    """Test dry-run delivery."""

    @pytest.mark.asyncio
    async def test_logs_instead_of_sending(self, alert_channel, caplog):
        alert, _ = sample()

        with caplog.at_level(logging.WARNING, logger="validify.alerting.notifiers"):
            assert await ConsoleNotifier().notify(alert_channel, alert) is True

        alert_channel.send.assert_not_called()
        assert "[ALERT:BOT_ADDED]" in caplog.text
