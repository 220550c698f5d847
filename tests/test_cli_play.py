import asyncio
import builtins

import pytest
from apps.cli.play import parse_guess, play
from hanzidle.datasets import VocabularyRepository
from hanzidle.dictionary import DictionaryService
from hanzidle.engine import make_word
from hanzidle.harness import GameSession


@pytest.fixture(scope="module")
def service():
    return DictionaryService(VocabularyRepository.from_dir(), seed=0)


def _parse(service, line, N=2):
    return asyncio.run(parse_guess(service, line, N))


def _play(service, session):
    return asyncio.run(play(service, session))


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr(builtins, "input", fake_input)


# --- parsing ---
def test_characters_only_resolves_pinyin(service):
    word, err = _parse(service, "学习")
    assert err == ""
    assert word.pinyin == ("XUE", "XI")


def test_explicit_polyphonic_reading(service):
    word, err = _parse(service, "长大 zhǎng da")
    assert err == ""
    assert word.pinyin == ("ZHANG", "DA")


def test_explicit_reading_matching_lookup_is_accepted(service):
    word, err = _parse(service, "学习 xue xi")
    assert err == ""
    assert word.pinyin == ("XUE", "XI")


def test_reading_outside_options_is_rejected(service):
    word, err = _parse(service, "长大 ban da")
    assert word is None
    assert "CHANG" in err and "ZHANG" in err


def test_single_reading_characters_keep_looked_up_pinyin(service):
    word, err = _parse(service, "学习 zhang zhong")
    assert word is None
    assert err == "学 reads XUE"

    # polyphonic first character is fine, the second one is not
    word, err = _parse(service, "长学 zhang xie")
    assert word is None
    assert err == "学 reads XUE"


@pytest.mark.parametrize("line", ["", "学", "ab", "学习 xue", "学习 xue 123", "学鑫", "学鑫 xue xin"])
def test_bad_lines(service, line):
    word, err = _parse(service, line)
    assert word is None and err


# --- loop ---
def test_play_to_a_win(monkeypatch, capsys, service):
    session = GameSession(make_word("学习", ["XUE", "XI"]))
    _feed(monkeypatch, ["时间", ":hint", "nonsense", "学习 zhang zhong", ":left", "学习"])
    assert _play(service, session) is True
    out = capsys.readouterr().out
    assert "5 pinyin letters" in out
    assert "hints need a proxy URL" in out
    assert "enter 2 Chinese characters" in out
    assert "学 reads XUE" in out
    assert "still consistent" in out
    assert "Solved in 2!" in out


def test_play_quit_reveals_target(monkeypatch, capsys, service):
    session = GameSession(make_word("学习", ["XUE", "XI"]))
    _feed(monkeypatch, [":quit"])
    assert _play(service, session) is False
    assert "The word was 学习 (XUE XI)" in capsys.readouterr().out


def test_play_out_of_guesses(monkeypatch, capsys, service):
    session = GameSession(make_word("学习", ["XUE", "XI"]), max_guesses=2)
    _feed(monkeypatch, ["时间", "学校"])
    assert _play(service, session) is False
    out = capsys.readouterr().out
    assert "学校  X/ÜE X/IAO" in out
    assert "The word was 学习" in out
