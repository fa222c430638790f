"""
Alerting for Validify Sentinel.

This package provides the link heuristics, alert formatting and the
delivery path from a formatted alert to the alert channel.
"""

from .alerts import Alert, AlertCategory
from .heuristics import (
    LinkScan,
    LinkScanner,
    SuspiciousHit,
    contains_suspicious_keyword,
    domain_of,
    extract_urls,
    is_allowlisted,
    is_suspicious_domain,
)
from .formatter import (
    format_bot_added,
    format_role_updated,
    format_suspicious_link,
    format_webhook_created,
)
from .notifiers import BaseNotifier, ChannelNotifier, ConsoleNotifier
from .manager import AlertDispatcher

__all__ = [
    # Core types
    "Alert",
    "AlertCategory",
    # Heuristics
    "LinkScan",
    "LinkScanner",
    "SuspiciousHit",
    "contains_suspicious_keyword",
    "domain_of",
    "extract_urls",
    "is_allowlisted",
    "is_suspicious_domain",
    # Formatting
    "format_bot_added",
    "format_role_updated",
    "format_suspicious_link",
    "format_webhook_created",
    # Notifiers
    "BaseNotifier",
    "ChannelNotifier",
    "ConsoleNotifier",
    # Dispatcher
    "AlertDispatcher",
]
