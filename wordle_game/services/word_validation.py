"""
Word Validation Service

Checks that user-submitted words are real English words using a remote
dictionary, falling back to the local format rule when the lookup fails.
Only consulted when the configured word list is extended.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import requests

from ..models.game import is_valid_word_format
from ..utils.game_logger import game_logger

DICTIONARY_API_URL = 'https://api.dictionaryapi.dev/api/v2/entries/en/'


@dataclass
class WordValidationResult:
    valid: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)


class WordValidationService:
    """
    Dictionary lookup client.

    Lookups for a batch run concurrently on a thread pool; results keep
    the order of the input words.
    """

    def __init__(self,
                 api_url: str = DICTIONARY_API_URL,
                 timeout: float = 5,
                 max_workers: int = 8,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.timeout = timeout
        self.max_workers = max_workers
        self.http = session or requests.Session()

    def is_real_word(self, word: str) -> bool:
        """
        Validates if a word is a real English word using the dictionary API.
        """
        try:
            response = self.http.get(f"{self.api_url}{word.lower()}", timeout=self.timeout)
        except requests.RequestException as e:
            game_logger.logger.warning(f"Dictionary lookup failed for '{word}': {e}")
            # Fallback: basic validation if API fails
            return is_valid_word_format(word)
        return response.ok

    def validate_words(self, words: Sequence[str]) -> WordValidationResult:
        """
        Validates multiple words at once.

        Returns:
            WordValidationResult with valid and invalid words in input order
        """
        result = WordValidationResult()
        if not words:
            return result

        workers = max(1, min(self.max_workers, len(words)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            verdicts = list(executor.map(self.is_real_word, words))

        for word, is_valid in zip(words, verdicts):
            if is_valid:
                result.valid.append(word)
            else:
                result.invalid.append(word)
        return result
