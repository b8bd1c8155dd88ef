"""
Debate lifecycle rules.

The stored ``status`` is a cache of what wall-clock time implies: a debate
whose ``ends_at`` has passed is logically ended even before the record is
refreshed. These helpers are pure; the repository applies the refresh.
"""

from .models import Debate, DebateStatus, HOUR_MS


def is_active(debate: Debate, now: int) -> bool:
    """True iff the debate is stored as active and its window is still open."""
    return debate.status == DebateStatus.ACTIVE and debate.ends_at > now


def is_ended(debate: Debate, now: int) -> bool:
    """True once voting has closed, whether or not the record says so yet."""
    return debate.status == DebateStatus.ENDED or (
        debate.status == DebateStatus.ACTIVE and debate.ends_at <= now
    )


def needs_refresh(debate: Debate, now: int) -> bool:
    """True when the stored status lags behind the clock."""
    return debate.status == DebateStatus.ACTIVE and debate.ends_at <= now


def compute_ends_at(created_at: int, duration_hours: float) -> int:
    return created_at + int(duration_hours * HOUR_MS)
