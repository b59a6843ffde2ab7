import random

import pytest

from wordle_game.config import WORD_LIST
from wordle_game.models.game import LetterStatus
from wordle_game.services.narrower import CandidateNarrower, narrow
from wordle_game.services.scoring import score


def statuses(row):
    return [status for _, status in row]


def test_all_miss_keeps_whole_pool():
    result = narrow(("crane", "trace", "react"), "zzzzz")
    assert result.new_pool == ("crane", "trace", "react")
    assert statuses(result.feedback) == [LetterStatus.MISS] * 5
    assert result.finalized_answer is None


def test_pure_miss_partition_is_always_chosen():
    # crane, trace and react all share letters with the guess; lofty shares none
    result = narrow(("crane", "trace", "react", "lofty"), "crane")
    assert result.new_pool == ("lofty",)
    assert result.finalized_answer == "lofty"
    assert statuses(result.feedback) == [LetterStatus.MISS] * 5


def test_partition_members_keep_pool_order():
    result = narrow(("bumps", "crane", "lofty"), "crane")
    assert result.new_pool == ("bumps", "lofty")


def test_fewest_hits_when_some_partition_has_no_presents():
    # crate scores 4 hits / 0 presents, so the fewest-presents minimum is zero
    # and the partition with the fewest hits (react: 1 hit, 3 presents) wins
    result = narrow(("trace", "react", "crate"), "crane")
    assert result.new_pool == ("react",)
    assert result.feedback == score("crane", "react")


def test_fewest_presents_when_every_partition_has_presents():
    # presents: react 3, trace 1, nacre 4 -> trace, although react has fewer hits
    result = narrow(("react", "trace", "nacre"), "crane")
    assert result.new_pool == ("trace",)
    assert result.feedback == score("crane", "trace")


def test_exact_guess_is_not_conceded_while_alternatives_exist():
    result = narrow(("crane", "crate"), "crane")
    assert result.new_pool == ("crate",)


def test_single_candidate_pool_is_finalized():
    result = narrow(("crane",), "crane")
    assert result.finalized_answer == "crane"
    assert statuses(result.feedback) == [LetterStatus.HIT] * 5


def test_partition_groups_identical_feedback():
    partitions = CandidateNarrower().partition(("crane", "lofty", "bumps"), "crane")
    assert [p.words for p in partitions] == [["crane"], ["lofty", "bumps"]]
    assert partitions[0].hit_count == 5
    assert partitions[1].is_pure_miss


def test_empty_pool_is_a_programming_error():
    with pytest.raises(AssertionError):
        narrow((), "crane")


@pytest.mark.parametrize("seed", range(10))
def test_pool_never_grows_and_stays_consistent(seed):
    rng = random.Random(seed)
    pool = tuple(rng.sample(WORD_LIST, 9))
    guesses = rng.sample(WORD_LIST, 6)

    for guess in guesses:
        result = narrow(pool, guess)
        assert 1 <= len(result.new_pool) <= len(pool)
        assert set(result.new_pool) <= set(pool)
        # every surviving word explains the reported feedback
        for word in result.new_pool:
            assert score(guess, word) == result.feedback
        pool = result.new_pool
        if result.finalized_answer:
            break
