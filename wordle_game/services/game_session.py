"""
Game Session

Per-game state machine for normal and hard mode.
"""

import random
import threading
import time
from typing import Callable, List, Optional, Tuple

from ..config.game_settings import HARD_MODE_POOL_SIZE
from ..errors import TerminalStateError, ValidationError
from ..models.game import (
    FeedbackRow, GameConfig, GameMode, GameState, GameStatus, is_valid_word_format, normalize_word
)
from .narrower import CandidateNarrower
from .scoring import score


class GameSession:
    """
    One player's game.

    Normal mode fixes a random answer at creation. Hard mode starts from a
    random candidate pool and lets CandidateNarrower pick feedback until
    the pool collapses to a single word, which then becomes the answer.

    Callers that share a session across threads must hold `lock` around
    submit_guess, reset and public_state.
    """

    def __init__(self,
                 session_id: Optional[str],
                 mode: GameMode,
                 config: GameConfig,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time,
                 narrower: Optional[CandidateNarrower] = None,
                 pool_size: int = HARD_MODE_POOL_SIZE):
        self.session_id = session_id
        self.mode = GameMode(mode)
        self.rng = rng or random.Random()
        self.clock = clock
        self.narrower = narrower or CandidateNarrower()
        self.pool_size = pool_size
        self.lock = threading.Lock()
        self._initialize(config)

    def _initialize(self, config: GameConfig) -> None:
        self.config = config.validate()
        self.round_index = 0
        self.guesses: List[str] = []
        self.feedback_history: List[FeedbackRow] = []
        self.status = GameStatus.IN_PROGRESS
        self.answer: Optional[str] = None
        self.candidate_pool: Optional[Tuple[str, ...]] = None
        self.created_at = self.clock()

        words = list(self.config.word_list)
        if self.mode == GameMode.NORMAL:
            self.answer = self.rng.choice(words)
        else:
            self.candidate_pool = tuple(self.rng.sample(words, min(self.pool_size, len(words))))
            # A one-word list leaves nothing to defer
            if len(self.candidate_pool) == 1:
                self.answer = self.candidate_pool[0]

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def answer_finalized(self) -> bool:
        return self.answer is not None

    @staticmethod
    def validate_guess(raw: str) -> str:
        """
        Normalize a raw guess.

        Raises:
            ValidationError: If the guess is not exactly five letters
        """
        if not raw or not isinstance(raw, str):
            raise ValidationError("Guess must be a string")

        guess = normalize_word(raw)
        if len(guess) != 5:
            raise ValidationError("Guess must be exactly 5 letters")
        if not is_valid_word_format(guess):
            raise ValidationError("Guess must contain only English alphabet letters")
        return guess

    def submit_guess(self, raw: str) -> Tuple[FeedbackRow, GameState]:
        """
        Score a guess and advance the round.

        Returns:
            Tuple of (feedback row, public state after the guess)

        Raises:
            TerminalStateError: If the game is already over
            ValidationError: If the guess is malformed
        """
        if self.game_over:
            raise TerminalStateError()

        guess = self.validate_guess(raw)

        if self.answer is not None:
            feedback = score(guess, self.answer)
        else:
            result = self.narrower.narrow(self.candidate_pool, guess)
            self.candidate_pool = result.new_pool
            self.answer = result.finalized_answer
            feedback = result.feedback

        self.guesses.append(guess)
        self.feedback_history.append(feedback)
        self.round_index += 1

        if self.answer is not None and guess == self.answer:
            self.status = GameStatus.WON
        elif self.round_index >= self.config.max_rounds:
            self.status = GameStatus.LOST

        assert self.round_index == len(self.guesses) == len(self.feedback_history)
        assert self.round_index <= self.config.max_rounds
        return feedback, self.public_state()

    def reset(self, config: GameConfig) -> GameState:
        """Start over under the same id with a new config."""
        self._initialize(config)
        return self.public_state()

    def public_state(self) -> GameState:
        """
        Returns the current game state without revealing the answer
        unless the game is over.
        """
        is_hard = self.mode == GameMode.HARD
        return GameState(
            session_id=self.session_id,
            mode=self.mode.value,
            current_round=self.round_index,
            max_rounds=self.config.max_rounds,
            game_over=self.game_over,
            won=self.won,
            guesses=self.guesses.copy(),
            answer=self.answer if self.game_over else None,
            candidates_remaining=len(self.candidate_pool) if is_hard else None,
            answer_finalized=self.answer_finalized if is_hard else None
        )
