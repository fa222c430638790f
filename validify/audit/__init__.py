"""Audit trail: alert records, the JSON log store, and audit log lookups."""
from validify.audit.records import (
    AlertRecord,
    BotAddedRecord,
    RoleUpdatedRecord,
    SuspiciousLinkRecord,
    WebhookCreatedRecord,
)
from validify.audit.store import EventLogStore
from validify.audit.lookup import AuditLookup, LookupResult, LookupStatus

__all__ = [
    "AlertRecord",
    "BotAddedRecord",
    "RoleUpdatedRecord",
    "WebhookCreatedRecord",
    "SuspiciousLinkRecord",
    "EventLogStore",
    "AuditLookup",
    "LookupResult",
    "LookupStatus",
]
