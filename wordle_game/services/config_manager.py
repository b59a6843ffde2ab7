"""
Config Manager

Holds the word list and round limit that new sessions default to, and
extends the word list only with words the dictionary accepts.
"""

import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LIST
from ..errors import ConfigError
from ..models.game import GameConfig, is_valid_word_format, normalize_word
from .word_validation import WordValidationService


@dataclass
class AddWordsResult:
    added: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.added) > 0

    def to_dict(self):
        return {
            'added': self.added,
            'duplicates': self.duplicates,
            'invalid': self.invalid,
            'success': self.success
        }


class ConfigManager:
    """
    Mutable default configuration.

    Every read hands out an immutable GameConfig snapshot, so sessions
    already bound to a config never see later edits.
    """

    def __init__(self,
                 validator: WordValidationService,
                 initial_config: Optional[GameConfig] = None):
        self.validator = validator
        self._default = (initial_config or GameConfig(word_list=tuple(WORD_LIST), max_rounds=MAX_ROUNDS)).validate()
        self._config = self._default
        self._lock = threading.Lock()

    def get_config(self) -> GameConfig:
        with self._lock:
            return self._config

    def word_count(self) -> int:
        return len(self.get_config().word_list)

    def add_words(self, new_words: Iterable[str]) -> AddWordsResult:
        """
        Add new words to the configuration with validation.

        Malformed words are reported as invalid without a dictionary
        lookup; words already configured (or repeated in the batch) are
        reported as duplicates.
        """
        result = AddWordsResult()
        current = set(self.get_config().word_list)
        candidates: List[str] = []

        for raw in new_words:
            word = normalize_word(raw) if isinstance(raw, str) else str(raw)
            if not is_valid_word_format(word):
                result.invalid.append(word)
            elif word in current or word in candidates:
                result.duplicates.append(word)
            else:
                candidates.append(word)

        # Dictionary lookups happen outside the config lock
        lookup = self.validator.validate_words(candidates)
        result.invalid.extend(lookup.invalid)

        with self._lock:
            existing = self._config.word_list
            added = [word for word in lookup.valid if word not in existing]
            result.duplicates.extend(word for word in lookup.valid if word in existing)
            self._config = GameConfig(word_list=existing + tuple(added), max_rounds=self._config.max_rounds)

        result.added = added
        return result

    def remove_words(self, words_to_remove: Iterable[str]) -> List[str]:
        """
        Remove words from configuration.

        Raises:
            ConfigError: If removal would leave the word list empty
        """
        targets = {normalize_word(word) for word in words_to_remove if isinstance(word, str)}
        with self._lock:
            removed = [word for word in self._config.word_list if word in targets]
            remaining = tuple(word for word in self._config.word_list if word not in targets)
            if not remaining:
                raise ConfigError("Word list cannot be empty")
            self._config = GameConfig(word_list=remaining, max_rounds=self._config.max_rounds)
        return removed

    def update_max_rounds(self, max_rounds: int) -> GameConfig:
        """
        Raises:
            ConfigError: If max_rounds is outside the allowed range
        """
        with self._lock:
            updated = GameConfig(word_list=self._config.word_list, max_rounds=max_rounds).validate()
            self._config = updated
        return updated

    def reset_to_default(self) -> GameConfig:
        with self._lock:
            self._config = self._default
        return self._default
