import os
import random
import sys

import pytest

# Ensure the project root (containing the `wordle_game` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.models.game import GameConfig
from wordle_game.services.game_service import GameService
from wordle_game.services.session_store import SessionStore
from wordle_game.services.word_validation import WordValidationResult


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeValidator:
    """Accepts every word except those listed as rejected."""

    def __init__(self, rejected=()):
        self.rejected = set(rejected)
        self.calls = []

    def validate_words(self, words):
        self.calls.append(list(words))
        result = WordValidationResult()
        for word in words:
            (result.invalid if word in self.rejected else result.valid).append(word)
        return result


NO_Z_WORDS = ["brain", "happy", "cloud", "sport", "music", "dance", "world", "plant", "movie", "space"]


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def clock():
    return FakeClock(1_000_000.0)


@pytest.fixture()
def store(rng, clock):
    return SessionStore(ttl_seconds=3600, rng=rng, clock=clock)


@pytest.fixture()
def game_service(store):
    return GameService(store)


@pytest.fixture()
def small_config():
    return GameConfig(word_list=("crane", "trace", "react", "lofty"), max_rounds=6)


@pytest.fixture()
def validator():
    return FakeValidator(rejected={"xylyl"})


@pytest.fixture()
def flask_app(store, validator):
    return create_app(TestingConfig, session_store=store, word_validator=validator)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
