"""
Game Configuration Constants Module

Game rules shared by both play modes. The word list here is only the
default; sessions are created from whatever GameConfig the caller supplies.
"""

from typing import Dict, Final, List, Sequence

WORD_LENGTH: Final[int] = 5

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
"""

MIN_ROUNDS_LIMIT: Final[int] = 1
MAX_ROUNDS_LIMIT: Final[int] = 20
MAX_ROUNDS_OPTIONS: Final[List[int]] = [3, 4, 5, 6, 7, 8, 9, 10]

# Hard mode draws this many candidates from the word list per session
HARD_MODE_POOL_SIZE: Final[int] = 9

# Sessions older than this are purged the next time a session is created
SESSION_TTL_SECONDS: Final[int] = 60 * 60

# Default Word Database
WORD_LIST: Final[List[str]] = [
    "brain", "happy", "cloud", "sport", "music",
    "dance", "world", "plant", "movie", "space",
    "light", "beach", "dream", "phone", "table",
    "house", "river", "smile", "heart", "peace",
    "power", "trust", "magic", "sleep", "green",
    "basic", "party", "stone", "fresh", "voice",
]


def validate_word_list_integrity(word_list: Sequence[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of a word database.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only ASCII alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    # Validate each word meets game requirements
    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")
    
    # Validate uniqueness (no duplicates)
    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


def get_word_statistics(word_list: Sequence[str] = WORD_LIST) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.
    
    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    if not word_list:
        return {"error": "Word list is empty"}
    
    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)
    
    # Calculate letter frequency distribution
    letter_frequency: Dict[str, int] = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
    
    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
