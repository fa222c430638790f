"""
Alert dispatcher: resolves the alert channel, delivers, then records.
"""

import logging
from typing import Any, Dict, Optional

from ..audit.records import AlertRecord
from ..audit.store import EventLogStore
from ..core.config import AlertConfig
from .alerts import Alert
from .notifiers import BaseNotifier

logger = logging.getLogger(__name__)


class AlertDispatcher:
    """
    Delivers alerts to the configured channel and appends audit records.

    A record is appended only after its alert was delivered. Log store
    failures never affect delivery.
    """

    def __init__(
        self,
        config: AlertConfig,
        notifier: BaseNotifier,
        store: EventLogStore,
    ):
        """
        Initialize the dispatcher.

        Args:
            config: Alert configuration (provides the alert channel id)
            notifier: Delivery channel for alerts
            store: Audit log store for records
        """
        self.config = config
        self.notifier = notifier
        self.store = store
        self._stats = {
            "alerts_sent": 0,
            "delivery_failures": 0,
            "records_written": 0,
            "record_failures": 0,
        }

    def resolve_channel(self, guild: Any) -> Optional[Any]:
        """Return the guild's alert channel, or None if unconfigured or missing."""
        channel_id = self.config.alert_channel_id
        if channel_id is None:
            return None

        channel = guild.get_channel(channel_id)
        if channel is None:
            logger.debug(f"Alert channel {channel_id} not found in guild {guild.id}")
        return channel

    async def dispatch(self, channel: Any, alert: Alert, record: AlertRecord) -> bool:
        """
        Deliver an alert and record it.

        Args:
            channel: Resolved alert channel
            alert: Formatted alert
            record: Audit record for the same event

        Returns:
            True if the alert was delivered
        """
        delivered = await self.notifier.notify(channel, alert)
        if not delivered:
            self._stats["delivery_failures"] += 1
            return False
        self._stats["alerts_sent"] += 1

        if await self.store.append(record):
            self._stats["records_written"] += 1
        else:
            self._stats["record_failures"] += 1
        return True

    def get_stats(self) -> Dict[str, Any]:
        """Get dispatcher statistics."""
        return dict(self._stats)


__all__ = ["AlertDispatcher"]
