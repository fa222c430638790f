"""
Alert formatting.

One builder per category. Builders are pure: they take already-resolved
names and flags and return an Alert stamped with the formatting time.
"""

from typing import Optional, Sequence

from .alerts import Alert, AlertCategory
from .heuristics import SuspiciousHit

UNKNOWN = "Unknown"


def build_alert(category: AlertCategory, description: str) -> Alert:
    """Wrap a description in an Alert with the category's title and color."""
    return Alert(
        category=category,
        title=category.title,
        description=description,
        color=category.color,
    )


def format_bot_added(bot_tag: str, bot_id: int, added_by: Optional[str]) -> Alert:
    description = (
        "🤖 **A bot was added to the server**\n\n"
        f"**Bot:** {bot_tag} ({bot_id})\n"
        f"**Added by:** {added_by or UNKNOWN}\n"
        "**Action:** Review bot permissions & OAuth scopes."
    )
    return build_alert(AlertCategory.BOT_ADDED, description)


def format_role_updated(
    old_name: str,
    new_name: str,
    perms_changed: bool,
    changed_by: Optional[str],
) -> Alert:
    """
    Build a role change alert.

    The name-diff line appears only when the name changed, and the
    permissions lines only when the permission bitmask changed.
    """
    lines = ["🛡️ **Role updated**", "", f"**Role:** {new_name}"]

    if old_name != new_name:
        lines.append(f'**Name change:** "{old_name}" → "{new_name}"')
    if perms_changed:
        lines.append("**Permissions changed:** Yes")
        lines.append("**Action:** Review this role’s privileges.")

    lines.append("")
    lines.append(f"**Changed by:** {changed_by or UNKNOWN}")

    return build_alert(AlertCategory.ROLE_UPDATED, "\n".join(lines))


def format_webhook_created(
    channel_name: Optional[str],
    created_by: Optional[str],
    webhook_name: Optional[str],
) -> Alert:
    description = (
        "🪝 **Webhook created**\n\n"
        f"**Channel:** {channel_name or UNKNOWN}\n"
        f"**Created by:** {created_by or UNKNOWN}\n"
        f"**Webhook:** {webhook_name or UNKNOWN}\n\n"
        "**Action:** Verify this webhook is authorized."
    )
    return build_alert(AlertCategory.WEBHOOK_CREATED, description)


def format_suspicious_link(
    author_tag: str,
    channel_name: Optional[str],
    hits: Sequence[SuspiciousHit],
    keyword_flag: bool,
) -> Alert:
    """
    Build a suspicious link alert.

    With no URL hits the body says so explicitly; that case is a
    keyword-only flag.
    """
    if hits:
        hit_text = "\n".join(f"• {hit.url}\n  ↳ {hit.reason}" for hit in hits)
    else:
        hit_text = "• No URL match. Keyword-only flag."

    description = (
        "🔗 **Potential phishing / scam pattern detected**\n\n"
        f"**User:** {author_tag}\n"
        f"**Channel:** {channel_name or UNKNOWN}\n\n"
        f"**Reason(s):**\n{hit_text}\n\n"
        f"**Keyword flag:** {'Yes' if keyword_flag else 'No'}\n"
        "**Action:** Review message and verify against your official links."
    )
    return build_alert(AlertCategory.SUSPICIOUS_LINK, description)


__all__ = [
    "UNKNOWN",
    "build_alert",
    "format_bot_added",
    "format_role_updated",
    "format_webhook_created",
    "format_suspicious_link",
]
