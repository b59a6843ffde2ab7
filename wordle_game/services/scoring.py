"""
Letter Scoring

Wordle letter evaluation shared by both play modes.
"""

from typing import List, Optional

from ..models.game import FeedbackRow, LetterStatus


def score(guess: str, answer: str) -> FeedbackRow:
    """
    Classify each letter of a guess against one concrete answer.

    Both words are assumed to be normalized five-letter strings. Exact
    matches are consumed first; the remaining guess letters then claim
    unconsumed answer letters left to right, so a letter is never counted
    more often than it occurs in the answer.
    """
    answer_chars: List[Optional[str]] = list(answer)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: Mark all exact position matches (HIT)
    for i, letter in enumerate(guess):
        if letter == answer_chars[i]:
            statuses[i] = LetterStatus.HIT
            answer_chars[i] = None

    # Second pass: Mark present letters (PRESENT) and misses (MISS)
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if letter in answer_chars:
            statuses[i] = LetterStatus.PRESENT
            # Consume the leftmost unmatched occurrence
            answer_chars[answer_chars.index(letter)] = None
        else:
            statuses[i] = LetterStatus.MISS

    return [(letter, status) for letter, status in zip(guess, statuses)]


def count_status(feedback: FeedbackRow, status: LetterStatus) -> int:
    return sum(1 for _, letter_status in feedback if letter_status == status)


def is_winning_feedback(feedback: FeedbackRow) -> bool:
    return all(status == LetterStatus.HIT for _, status in feedback)


def feedback_key(feedback: FeedbackRow) -> str:
    """
    Convert a feedback row to a string key for grouping.
    """
    return ''.join(f"{letter}:{status.value}" for letter, status in feedback)
