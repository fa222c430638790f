"""Base class for event reactors."""
import abc
import logging
from typing import Awaitable, Optional

from ..alerting.alerts import Alert
from ..alerting.manager import AlertDispatcher
from ..audit.lookup import AuditLookup
from ..core.config import AlertConfig

logger = logging.getLogger(__name__)


class Reactor(abc.ABC):
    """
    A handler bound to one inbound event type.

    Reactors hold no state between events. Each one is gated by its own
    config toggle; a disabled reactor does nothing at all.
    """

    name: str = "reactor"

    def __init__(
        self,
        config: AlertConfig,
        dispatcher: AlertDispatcher,
        lookup: Optional[AuditLookup] = None,
    ):
        """
        Initialize the reactor.

        Args:
            config: Alert configuration
            dispatcher: Delivers alerts and appends records
            lookup: Audit log lookup for resolving the acting user
        """
        self.config = config
        self.dispatcher = dispatcher
        self.lookup = lookup or AuditLookup()

    @property
    @abc.abstractmethod
    def enabled(self) -> bool:
        """Whether this reactor's config toggle is on."""

    async def _guarded(self, handler: Awaitable[Optional[Alert]]) -> Optional[Alert]:
        """Run a handler coroutine, logging and swallowing any failure."""
        try:
            return await handler
        except Exception:
            logger.exception(f"{self.name} alert error")
            return None
