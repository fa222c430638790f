"""Event reactors: one handler per observed gateway event."""
from .base import Reactor
from .bot_added import BotAddedReactor
from .role_change import RoleChangeReactor
from .webhook_created import WebhookCreatedReactor
from .suspicious_link import SuspiciousLinkReactor

__all__ = [
    "Reactor",
    "BotAddedReactor",
    "RoleChangeReactor",
    "WebhookCreatedReactor",
    "SuspiciousLinkReactor",
]
