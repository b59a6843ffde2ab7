"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, MAX_ROUNDS_LIMIT, MIN_ROUNDS_LIMIT, WORD_LENGTH
from ..errors import ConfigError


class LetterStatus(Enum):
    """Per-position classification of a guessed letter."""
    HIT = "hit"
    PRESENT = "present"
    MISS = "miss"


class GameMode(Enum):
    NORMAL = "normal"
    HARD = "hard"


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


# One (letter, status) pair per guess position
FeedbackRow = List[Tuple[str, LetterStatus]]


def feedback_to_dict(feedback: FeedbackRow) -> List[Dict[str, str]]:
    """Serialize a feedback row for JSON responses."""
    return [{'letter': letter, 'result': status.value} for letter, status in feedback]


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_valid_word_format(word: str) -> bool:
    """Local word rule: exactly five ASCII letters."""
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


@dataclass(frozen=True)
class GameConfig:
    """
    Word list and round limit a session is bound to.

    Words are normalized (trimmed, lower-cased) and de-duplicated on
    construction; call validate() before binding a config to a session.
    """
    word_list: Tuple[str, ...]
    max_rounds: int = MAX_ROUNDS

    def __post_init__(self):
        if not isinstance(self.word_list, (list, tuple)):
            raise ConfigError("Word list must be a list of words")
        words = []
        for word in self.word_list:
            if not isinstance(word, str):
                raise ConfigError("Word list must only contain strings")
            words.append(normalize_word(word))
        object.__setattr__(self, 'word_list', tuple(dict.fromkeys(words)))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], default: Optional['GameConfig'] = None) -> 'GameConfig':
        """
        Build a config from a JSON payload, falling back to default for
        missing keys.

        Raises:
            ConfigError: If the payload is malformed or fails validation
        """
        if data is None:
            if default is None:
                raise ConfigError("Game configuration is required")
            return default.validate()
        if not isinstance(data, Mapping):
            raise ConfigError("Game configuration must be an object")

        word_list = data.get('word_list', default.word_list if default else None)
        max_rounds = data.get('max_rounds', default.max_rounds if default else MAX_ROUNDS)
        if word_list is None:
            raise ConfigError("Invalid word list provided")
        return cls(word_list=word_list, max_rounds=max_rounds).validate()

    def validate(self) -> 'GameConfig':
        if not self.word_list:
            raise ConfigError("Invalid word list provided")

        malformed = [word for word in self.word_list if not is_valid_word_format(word)]
        if malformed:
            raise ConfigError(f"Word list contains invalid words: {malformed}")

        # bool is an int subclass; reject it explicitly
        if (not isinstance(self.max_rounds, int) or isinstance(self.max_rounds, bool)
                or not MIN_ROUNDS_LIMIT <= self.max_rounds <= MAX_ROUNDS_LIMIT):
            raise ConfigError(f"Max rounds must be between {MIN_ROUNDS_LIMIT} and {MAX_ROUNDS_LIMIT}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {'word_list': list(self.word_list), 'max_rounds': self.max_rounds}


@dataclass
class GameState:
    """Client-safe view of a session; never carries an unrevealed answer."""
    session_id: str
    mode: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str] = field(default_factory=list)
    answer: Optional[str] = None  # Only included when game is over
    candidates_remaining: Optional[int] = None  # Hard mode only
    answer_finalized: Optional[bool] = None  # Hard mode only

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'session_id': self.session_id,
            'mode': self.mode,
            'current_round': self.current_round,
            'max_rounds': self.max_rounds,
            'game_over': self.game_over,
            'won': self.won,
            'guesses': list(self.guesses),
        }
        if self.answer is not None:
            data['answer'] = self.answer
        if self.mode == GameMode.HARD.value:
            data['candidates_remaining'] = self.candidates_remaining
            data['answer_finalized'] = self.answer_finalized
        return data
