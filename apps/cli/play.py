# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Builds the dictionary service (proxy URL from --proxy-url or
     HANZIDLE_PROXY_URL; without one everything runs on built-in tables).
  2) Picks a target (random, or --word) and starts a session.
  3) Reads guesses from stdin until the game is won or lost.

Input lines:
  学习              characters only, pinyin resolved automatically
  长大 zhang da     characters plus explicit readings (pick a polyphonic reading)
  :hint             reveal the next hint (proxy only)
  :left             how many built-in words are still consistent
  :quit             give up
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional, Tuple

from hanzidle.config import Settings, build_service
from hanzidle.datasets import pinyin_letter_count
from hanzidle.dictionary import DictionaryService
from hanzidle.engine import Word, filter_candidates, validate_guess
from hanzidle.harness import GameSession, format_result, hints_due
from hanzidle.pinyin import normalize_pinyin, validate_token


async def parse_guess(service: DictionaryService, line: str, N: int) -> Tuple[Optional[Word], str]:
    """
    Turn one input line into a Word.

    Pinyin is always looked up first. Explicit readings may only pick another
    registered reading of a polyphonic character; every other character must
    keep its looked-up reading.

    Returns (word, "") on success or (None, error message).
    """
    parts = line.split()
    if not parts:
        return None, "empty input"
    chars, readings = parts[0], parts[1:]

    if not validate_guess(chars, N):
        return None, f"enter {N} Chinese characters"
    if readings and len(readings) != N:
        return None, f"give one reading per character ({N})"

    tokens: List[str] = []
    for raw in readings:
        tok = validate_token(normalize_pinyin(raw))
        if tok is None:
            return None, f"invalid pinyin: {raw}"
        tokens.append(tok)

    word = await service.create_word(chars)
    if word is None:
        return None, f"pinyin unavailable for {chars}"

    for i, (ch, tok) in enumerate(zip(chars, tokens)):
        if tok == word.pinyin[i]:
            continue
        if not service.is_polyphonic(ch):
            return None, f"{ch} reads {word.pinyin[i]}"
        options = service.pinyin_options(ch)
        if tok not in options:
            return None, f"{ch} reads as one of: {' '.join(options)}"
        word = word.with_reading(i, tok)
    return word, ""


async def _show_hints(service: DictionaryService, session: GameSession, shown: int, want: int,
                      is_idiom: bool) -> int:
    while shown < want:
        hint = await service.get_word_hint(
            session.target_word.characters, level=shown + 1, is_idiom=is_idiom)
        if hint is None:
            break
        shown += 1
        print(f"hint {shown}: {hint}")
    return shown


async def play(service: DictionaryService, session: GameSession) -> bool:
    """Run the read-eval loop; returns True if the player won."""
    N = session.word_length
    is_idiom = N == 4
    shown = 0
    letters = pinyin_letter_count(list(session.target_word.pinyin))
    print(f"Guess the {N}-character word ({letters} pinyin letters, "
          f"{session.max_guesses} tries).")

    while not session.is_game_over:
        try:
            line = input(f"[{session.remaining_guesses} left] > ").strip()
        except EOFError:
            break

        if line == ":quit":
            break
        if line == ":hint":
            if service.has_proxy:
                shown = await _show_hints(service, session, shown, shown + 1, is_idiom)
            else:
                print("hints need a proxy URL")
            continue
        if line == ":left":
            left = filter_candidates(service.repository.words_of_length(N), session.guesses)
            print(f"{len(left)} built-in word(s) still consistent")
            continue

        word, err = await parse_guess(service, line, N)
        if word is None:
            print(err)
            continue

        result = session.submit_guess(word)
        if result is None:
            print("guess not accepted")
            continue
        print(format_result(result))

        if service.has_proxy and not session.is_game_over:
            shown = await _show_hints(
                service, session, shown, hints_due(len(session.guesses)), is_idiom)

    target = session.target_word
    if session.is_won:
        print(f"Solved in {len(session.guesses)}!")
    else:
        print(f"The word was {target.characters} ({' '.join(target.pinyin)})")
    return session.is_won


async def amain(ap: argparse.ArgumentParser, args: argparse.Namespace) -> bool:
    settings = Settings.from_env(proxy_url=args.proxy_url, max_guesses=args.max_guesses)
    service = build_service(settings, seed=args.seed)
    try:
        if args.word:
            target = await service.create_word(args.word)
            if target is None:
                ap.error(f"cannot resolve pinyin for {args.word}")
        else:
            target = await service.fetch_random_word(args.length)

        session = GameSession(target, max_guesses=settings.max_guesses)
        return await play(service, session)
    finally:
        service.close()


def main():
    ap = argparse.ArgumentParser(description="hanzidle: Chinese word guessing game")
    ap.add_argument("--length", type=int, default=2, choices=[2, 4],
                    help="word length (2 = words, 4 = idioms)")
    ap.add_argument("--max-guesses", type=int, help="guess budget (default 6)")
    ap.add_argument("--proxy-url", help="proxy base URL (overrides HANZIDLE_PROXY_URL)")
    ap.add_argument("--seed", type=int, help="RNG seed for target selection")
    ap.add_argument("--word", help="play against this word instead of a random one")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # One event loop for the whole game.
    asyncio.run(amain(ap, args))


if __name__ == "__main__":
    main()
