"""
Administrative-action lookup against the guild audit log.

Only the most recent entry of the requested kind is examined. Finding
nothing is a normal outcome, distinct from the lookup itself failing.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import discord
import structlog

logger = structlog.get_logger(__name__)

UNKNOWN_ACTOR = "Unknown"


class LookupStatus(str, Enum):
    """Outcome of an audit log query."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    """
    Result of looking up the latest audit entry for an action.

    Attributes:
        status: Whether an entry was found, absent, or the query failed
        entry: The audit log entry when found
        error: The exception when the query failed
    """
    status: LookupStatus
    entry: Optional[discord.AuditLogEntry] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def actor(self) -> Optional[Any]:
        """The user who performed the action, if known."""
        return self.entry.user if self.entry is not None else None

    @property
    def target(self) -> Optional[Any]:
        return self.entry.target if self.entry is not None else None

    @property
    def actor_tag(self) -> str:
        return str(self.actor) if self.actor is not None else UNKNOWN_ACTOR

    @property
    def actor_id(self) -> Optional[int]:
        return self.actor.id if self.actor is not None else None


class AuditLookup:
    """Queries a guild's audit log for the most recent matching action."""

    async def latest(self, guild: discord.Guild, action: discord.AuditLogAction) -> LookupResult:
        """
        Fetch the most recent audit entry of the given kind.

        Args:
            guild: Guild whose audit log to query
            action: Audit log action kind

        Returns:
            LookupResult; FAILED when the bot lacks access or the API errors
        """
        try:
            async for entry in guild.audit_logs(limit=1, action=action):
                return LookupResult(status=LookupStatus.FOUND, entry=entry)
        except discord.HTTPException as e:
            # Forbidden is a subclass: missing View Audit Log permission
            logger.warning(
                "audit_lookup_failed",
                guild_id=guild.id,
                action=action.name,
                status=getattr(e, "status", None),
                error=str(e),
            )
            return LookupResult(status=LookupStatus.FAILED, error=e)

        return LookupResult(status=LookupStatus.NOT_FOUND)


__all__ = ["UNKNOWN_ACTOR", "LookupStatus", "LookupResult", "AuditLookup"]
