from collections import Counter
from itertools import product

import pytest

from wordle_game.config import WORD_LIST
from wordle_game.models.game import LetterStatus
from wordle_game.services.scoring import count_status, feedback_key, is_winning_feedback, score

HIT, PRESENT, MISS = LetterStatus.HIT, LetterStatus.PRESENT, LetterStatus.MISS


def statuses(row):
    return [status for _, status in row]


@pytest.mark.parametrize("word", WORD_LIST)
def test_exact_match_is_all_hits(word):
    row = score(word, word)
    assert statuses(row) == [HIT] * 5
    assert is_winning_feedback(row)


def test_row_keeps_guess_letters_in_order():
    row = score("boots", "robot")
    assert [letter for letter, _ in row] == list("boots")


def test_robot_boots():
    # the middle "o" is an exact match, so the second "o" still finds the other one
    assert statuses(score("boots", "robot")) == [PRESENT, HIT, PRESENT, PRESENT, MISS]


def test_duplicate_guess_letter_beyond_answer_count_is_miss():
    assert statuses(score("speed", "abide")) == [MISS, MISS, PRESENT, MISS, PRESENT]


def test_hits_are_consumed_before_presents():
    # two "l"s in the answer, both matched exactly; the rest have nothing left
    assert statuses(score("lllll", "hello")) == [MISS, MISS, HIT, HIT, MISS]


def test_presents_consume_answer_left_to_right():
    assert statuses(score("eerie", "there")) == [PRESENT, MISS, PRESENT, MISS, HIT]


def test_no_shared_letters_is_all_miss():
    assert statuses(score("zzzzz", "crane")) == [MISS] * 5


def test_letter_never_counted_more_than_its_occurrences():
    words = WORD_LIST + ["robot", "boots", "hello", "lllll", "eerie", "there", "speed", "abide"]
    for guess, answer in product(words, repeat=2):
        occurrences = Counter(answer)
        credited = Counter(letter for letter, status in score(guess, answer) if status != MISS)
        for letter, count in credited.items():
            assert count <= occurrences[letter], (guess, answer)


def test_count_status_and_key():
    row = score("boots", "robot")
    assert count_status(row, HIT) == 1
    assert count_status(row, PRESENT) == 3
    assert feedback_key(row) == "b:present" + "o:hit" + "o:present" + "t:present" + "s:miss"
