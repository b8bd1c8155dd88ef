"""
Derived debate outcomes.

Winners are never stored; every view that shows one goes through
``winner()`` so the tie rule is applied identically everywhere.
"""

from typing import Optional

from .lifecycle import is_active, is_ended
from .models import (
    Debate,
    DebateResult,
    ResultsFilter,
    ResultsStats,
    ResultsSummary,
)


def winner(debate: Debate) -> Optional[str]:
    """
    Label with strictly more votes than the other option.

    Returns:
        The winning label, or None when the counts are equal.
    """
    first, second = debate.voting_options.labels()
    first_votes = debate.votes.tallies.get(first, 0)
    second_votes = debate.votes.tallies.get(second, 0)
    if first_votes > second_votes:
        return first
    if second_votes > first_votes:
        return second
    return None


def vote_percentage(votes: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up rounding
    return int(votes * 100 / total + 0.5)


def build_result(debate: Debate, now: int) -> DebateResult:
    total = debate.votes.total
    top = winner(debate)
    return DebateResult(
        debate=debate,
        total_votes=total,
        percentages={
            label: vote_percentage(debate.votes.tallies.get(label, 0), total)
            for label in debate.voting_options.labels()
        },
        winner=top,
        is_tie=top is None,
        ended=is_ended(debate, now),
    )


def _matches(debate: Debate, results_filter: ResultsFilter, now: int) -> bool:
    if results_filter == ResultsFilter.ENDED:
        return is_ended(debate, now)
    if results_filter == ResultsFilter.ACTIVE:
        return is_active(debate, now)
    return True


def summarize(
    debates: list[Debate],
    now: int,
    results_filter: ResultsFilter = ResultsFilter.ENDED,
    top_n: int = 5,
) -> ResultsSummary:
    """
    Build the results view over a set of debates.

    Stats always cover ended debates only; ``results_filter`` selects
    which debates are listed. Most-popular ranking is by total votes over
    every debate, keeping the given order for equal totals.
    """
    ended = [d for d in debates if is_ended(d, now)]
    stats = ResultsStats(
        total_debates=len(ended),
        total_votes=sum(d.votes.total for d in ended),
        total_participants=sum(len(d.votes.voters) for d in ended),
    )

    most_popular = sorted(debates, key=lambda d: d.votes.total, reverse=True)[:top_n]

    return ResultsSummary(
        stats=stats,
        most_popular=[build_result(d, now) for d in most_popular],
        debates=[build_result(d, now) for d in debates if _matches(d, results_filter, now)],
    )
