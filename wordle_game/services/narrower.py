"""
Candidate Narrowing

Adversarial feedback selection for hard mode. The narrower never commits
to an answer while more than one candidate can still explain the feedback
it reports.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..models.game import FeedbackRow, LetterStatus
from .scoring import count_status, feedback_key, score


@dataclass
class Partition:
    """Candidates that would all produce the same feedback for a guess."""
    feedback: FeedbackRow
    words: List[str] = field(default_factory=list)

    @property
    def hit_count(self) -> int:
        return count_status(self.feedback, LetterStatus.HIT)

    @property
    def present_count(self) -> int:
        return count_status(self.feedback, LetterStatus.PRESENT)

    @property
    def is_pure_miss(self) -> bool:
        return self.hit_count == 0 and self.present_count == 0


@dataclass
class NarrowResult:
    new_pool: Tuple[str, ...]
    feedback: FeedbackRow

    @property
    def finalized_answer(self) -> Optional[str]:
        """The committed answer once the pool has collapsed to one word."""
        return self.new_pool[0] if len(self.new_pool) == 1 else None


class CandidateNarrower:
    """
    Picks the truthful feedback that reveals the least about the answer.

    Selection policy, applied to the partitions of the pool:
    1. A pure-miss partition (no hits, no presents) always wins.
    2. Otherwise the fewest hits and the fewest presents are found
       independently across all partitions. If every partition has at
       least one present, the first partition with the fewest presents
       is chosen; else the first partition with the fewest hits.

    "First" means the partition whose earliest member comes first in
    pool order, which keeps the choice deterministic for a given pool.
    """

    def __init__(self, scorer: Callable[[str, str], FeedbackRow] = score):
        self.scorer = scorer

    def partition(self, pool: Sequence[str], guess: str) -> List[Partition]:
        """Group candidates by the feedback they would produce."""
        partitions: Dict[str, Partition] = {}
        for word in pool:
            feedback = self.scorer(guess, word)
            key = feedback_key(feedback)
            if key not in partitions:
                partitions[key] = Partition(feedback=feedback)
            partitions[key].words.append(word)
        return list(partitions.values())

    def select(self, partitions: List[Partition]) -> Partition:
        for candidate in partitions:
            if candidate.is_pure_miss:
                return candidate

        min_hits = min(p.hit_count for p in partitions)
        min_presents = min(p.present_count for p in partitions)

        if min_presents > 0:
            return next(p for p in partitions if p.present_count == min_presents)
        return next(p for p in partitions if p.hit_count == min_hits)

    def narrow(self, pool: Sequence[str], guess: str) -> NarrowResult:
        """
        Report feedback for a guess and shrink the pool accordingly.

        Args:
            pool: Non-empty candidate words still consistent with prior feedback
            guess: Normalized five-letter guess

        Returns:
            NarrowResult whose new_pool is a non-empty subset of pool
        """
        assert pool, "candidate pool must never be empty"

        chosen = self.select(self.partition(pool, guess))
        new_pool = tuple(chosen.words)

        assert new_pool and set(new_pool) <= set(pool)
        return NarrowResult(new_pool=new_pool, feedback=chosen.feedback)


def narrow(pool: Sequence[str], guess: str) -> NarrowResult:
    return CandidateNarrower().narrow(pool, guess)
