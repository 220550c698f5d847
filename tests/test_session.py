import pytest
from hanzidle.datasets import VocabularyRepository
from hanzidle.dictionary import DictionaryService
from hanzidle.engine import make_word
from hanzidle.harness import GameSession, GameStatus, MAX_GUESSES, format_board, format_result, hints_due
from hanzidle.harness.render import format_syllable

TARGET = make_word("学习", ["XUE", "XI"])
WRONG = make_word("时间", ["SHI", "JIAN"])


def test_lose_on_last_guess_then_reject():
    s = GameSession(TARGET)
    for i in range(MAX_GUESSES - 1):
        assert s.submit_guess(WRONG) is not None
        assert s.status is GameStatus.IN_PROGRESS
        assert s.remaining_guesses == MAX_GUESSES - (i + 1)

    last = s.submit_guess(WRONG)
    assert last is not None and not last.is_correct
    assert s.status is GameStatus.LOST
    assert s.is_game_over and not s.is_won
    assert s.remaining_guesses == 0

    # terminal: nothing is recorded any more
    assert s.submit_guess(TARGET) is None
    assert len(s.guesses) == MAX_GUESSES


def test_win_blocks_further_guesses():
    s = GameSession(TARGET)
    r = s.submit_guess(make_word("学习", ["XUE", "XI"]))
    assert r.is_correct
    assert s.status is GameStatus.WON and s.is_won
    assert s.submit_guess(WRONG) is None
    assert len(s.guesses) == 1


def test_win_after_wrong_guesses():
    s = GameSession(TARGET)
    s.submit_guess(WRONG)
    s.submit_guess(make_word("习学", ["XI", "XUE"]))
    assert s.status is GameStatus.IN_PROGRESS
    r = s.submit_guess(make_word("学习", ["XUE", "XI"]))
    assert r.is_correct
    assert s.status is GameStatus.WON
    assert s.remaining_guesses == MAX_GUESSES - 3
    assert s.submit_guess(WRONG) is None


def test_win_on_last_allowed_guess():
    s = GameSession(TARGET, max_guesses=2)
    s.submit_guess(WRONG)
    s.submit_guess(TARGET)
    assert s.status is GameStatus.WON and s.remaining_guesses == 0


def test_polyphonic_reading_does_not_win():
    s = GameSession(make_word("长大", ["CHANG", "DA"]))
    r = s.submit_guess(make_word("长大", ["ZHANG", "DA"]))
    assert r is not None and not r.is_correct
    assert s.status is GameStatus.IN_PROGRESS


def test_length_mismatch_is_rejected_without_side_effects():
    s = GameSession(TARGET)
    assert s.submit_guess(make_word("一心一意", ["YI", "XIN", "YI", "YI"])) is None
    assert s.guesses == []
    assert s.remaining_guesses == MAX_GUESSES
    assert s.status is GameStatus.IN_PROGRESS


def test_single_guess_budget():
    s = GameSession(TARGET, max_guesses=1)
    s.submit_guess(WRONG)
    assert s.status is GameStatus.LOST


def test_budget_must_be_positive():
    with pytest.raises(ValueError):
        GameSession(TARGET, max_guesses=0)


def test_random_session_uses_service_words():
    service = DictionaryService(VocabularyRepository.from_dir(), seed=7)
    s = GameSession.random(service, word_length=4, max_guesses=3)
    assert s.word_length == 4
    assert s.max_guesses == 3
    known = {w.characters for w in service.repository.words_of_length(4)}
    assert s.target_word.characters in known


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (6, 2)])
def test_hints_due(n, expected):
    assert hints_due(n) == expected


# --- rendering ---
def test_format_result_lines():
    s = GameSession(make_word("长大", ["CHANG", "DA"]))
    r = s.submit_guess(make_word("长大", ["ZHANG", "DA"]))
    assert format_result(r) == "长大  ZH/ANG D/A  char=GG  ini=-G  fin=GG"

    s = GameSession(make_word("银行", ["YIN", "HANG"]))
    r = s.submit_guess(make_word("行行", ["XING", "HANG"]))
    assert format_result(r) == "行行  X/ING* H/ANG  char=YG  ini=-G  fin=-G"
    assert format_syllable(r.matches[1]) == "H/ANG"


def test_format_board_numbers_rows():
    s = GameSession(TARGET)
    s.submit_guess(WRONG)
    s.submit_guess(TARGET)
    rows = format_board(s.guesses)
    assert len(rows) == 2
    assert rows[0].startswith("1. 时间")
    assert rows[1] == "2. 学习  X/ÜE X/I  char=GG  ini=GG  fin=GG"
