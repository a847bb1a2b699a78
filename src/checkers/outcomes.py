"""Tally persisted game outcomes into a win/loss/draw record."""

import logging
from collections import Counter
from typing import Iterable

from src.core.models import OutcomeRecord, WinRecord
from src.core.shared_types import Outcome

logger = logging.getLogger(__name__)

KNOWN_OUTCOMES = frozenset(outcome.value for outcome in Outcome)


def compute_win_record(records: Iterable[OutcomeRecord]) -> WinRecord:
    """
    Count wins ("player"), losses ("bot") and draws ("draw") from the player's point of view.

    ---
    Any other winner value (including NULL) is skipped: it counts towards none of the buckets and does not raise.
    """
    tally: Counter[str] = Counter()
    skipped = 0
    for record in records:
        if record.winner in KNOWN_OUTCOMES:
            tally[record.winner] += 1
        else:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d outcome record(s) with unrecognized winner.", skipped)

    return WinRecord(
        wins=tally[Outcome.PLAYER],
        losses=tally[Outcome.BOT],
        draws=tally[Outcome.DRAW],
    )
