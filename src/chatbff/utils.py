import re
from datetime import UTC, datetime

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_email(value: str) -> bool:
    return bool(EMAIL_RE.fullmatch(value))


def email_domain(email: str) -> str:
    """Return the lowercased part after the last '@'."""
    return email.rsplit("@", 1)[-1].lower()


def now() -> datetime:
    return datetime.now(UTC)
