"""Pytest fixtures for Validify Sentinel tests."""
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from validify.alerting.manager import AlertDispatcher
from validify.alerting.notifiers import ChannelNotifier
from validify.audit.lookup import LookupResult, LookupStatus
from validify.audit.store import EventLogStore
from validify.core.config import AlertConfig

GUILD_ID = 111111111111111111
ALERT_CHANNEL_ID = 222222222222222222


# --- Discord fakes ---

@dataclass
class FakeUser:
    """Minimal stand-in for discord.User / discord.Member."""
    id: int
    name: str
    bot: bool = False
    guild: Any = None

    def __str__(self) -> str:
        return self.name


def make_entry(user: Optional[FakeUser] = None, target: Any = None, channel_id: Optional[int] = None):
    """Build an audit log entry; `after.channel` is set only when channel_id is given."""
    after = SimpleNamespace()
    if channel_id is not None:
        after.channel = SimpleNamespace(id=channel_id)
    return SimpleNamespace(user=user, target=target, after=after)


def found(entry) -> LookupResult:
    return LookupResult(status=LookupStatus.FOUND, entry=entry)


# --- Config Fixtures ---

@pytest.fixture
def alert_config() -> AlertConfig:
    """Config with every alert enabled."""
    return AlertConfig(
        ALERT_CHANNEL_ID=ALERT_CHANNEL_ID,
        ENABLE_BOT_ADD_ALERTS=True,
        ENABLE_ROLE_ALERTS=True,
        ENABLE_WEBHOOK_ALERTS=True,
        ENABLE_LINK_ALERTS=True,
        ALLOWLIST_DOMAINS=["discord.com", "github.com"],
        SUSPICIOUS_DOMAINS=["bit.ly", "grabify", "nitro"],
        SUSPICIOUS_KEYWORDS=["free nitro", "airdrop"],
    )


# --- Mock Fixtures ---

@pytest.fixture
def alert_channel() -> MagicMock:
    """The channel alerts are posted to."""
    channel = MagicMock()
    channel.id = ALERT_CHANNEL_ID
    channel.send = AsyncMock()
    return channel


@pytest.fixture
def guild(alert_channel: MagicMock) -> MagicMock:
    """A guild that contains the alert channel."""
    guild = MagicMock()
    guild.id = GUILD_ID
    guild.get_channel = MagicMock(
        side_effect=lambda cid: alert_channel if cid == ALERT_CHANNEL_ID else None
    )
    return guild


@pytest.fixture
def lookup() -> MagicMock:
    """Audit lookup that finds nothing unless a test says otherwise."""
    lookup = MagicMock()
    lookup.latest = AsyncMock(return_value=LookupResult(status=LookupStatus.NOT_FOUND))
    return lookup


@pytest.fixture
def log_store(tmp_path) -> EventLogStore:
    """Log store writing to a temporary file."""
    return EventLogStore(tmp_path / "validify-log.json")


@pytest.fixture
def dispatcher(alert_config: AlertConfig, log_store: EventLogStore) -> AlertDispatcher:
    return AlertDispatcher(config=alert_config, notifier=ChannelNotifier(), store=log_store)


@pytest.fixture
def moderator() -> FakeUser:
    return FakeUser(id=333333333333333333, name="mod_alice")


@pytest.fixture
def make_role(guild: MagicMock):
    """Factory for roles with a name and a permission bitmask."""
    def _make(name: str, permissions: int, role_id: int = 444444444444444444):
        return SimpleNamespace(
            id=role_id,
            name=name,
            permissions=discord.Permissions(permissions),
            guild=guild,
        )
    return _make


@pytest.fixture
def make_message(guild: MagicMock):
    """Factory for guild messages from a human author."""
    def _make(content: str, author: Optional[FakeUser] = None, in_guild: bool = True):
        return SimpleNamespace(
            content=content,
            guild=guild if in_guild else None,
            author=author or FakeUser(id=555555555555555555, name="someone"),
            channel=SimpleNamespace(id=666666666666666666, name="general"),
        )
    return _make
