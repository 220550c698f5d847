# apps/cli/check_vocab.py
"""
Vocabulary checks.

This script:
  1) Validates the vocabulary tables (counts, SHA, invalid/duplicate rows)
     and prints a one-line summary.
  2) With --resolve, resolves every listed word through the dictionary
     service (proxy first when configured) and reports words whose resolved
     pinyin disagrees with the recorded pinyin.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Tuple

from tqdm import tqdm

from hanzidle.config import Settings, build_service
from hanzidle.datasets import DATA_DIR, pretty_summary, validate_vocabulary
from hanzidle.dictionary import DictionaryService
from hanzidle.engine import Word


async def resolve_all(service: DictionaryService, words: List[Word], *, concurrency: int,
                      progress: bool) -> List[Tuple[Word, List[str] | None]]:
    """
    Resolve many words concurrently (bounded by `concurrency`).
    Returns (word, resolved pinyin or None) pairs whose pinyin disagrees.
    """
    sem = asyncio.Semaphore(concurrency)
    bar = tqdm(total=len(words), ncols=80, desc="Resolving", unit="word", disable=not progress)

    async def one(w: Word):
        async with sem:
            got = await service.lookup_pinyin(w.characters)
        bar.update(1)
        return w, got

    try:
        pairs = await asyncio.gather(*(one(w) for w in words))
    finally:
        bar.close()

    return [(w, got) for w, got in pairs if got is None or tuple(got) != w.pinyin]


def main():
    ap = argparse.ArgumentParser(description="hanzidle: validate vocabulary tables")
    ap.add_argument("--data-dir", default=str(DATA_DIR), help="directory with the *.tsv tables")
    ap.add_argument("--resolve", action="store_true",
                    help="also resolve every word and compare with recorded pinyin")
    ap.add_argument("--proxy-url", help="proxy base URL (overrides HANZIDLE_PROXY_URL)")
    ap.add_argument("--concurrency", type=int, default=4, help="parallel lookups for --resolve")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar for --resolve (auto = only on a terminal)"
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rep = validate_vocabulary(args.data_dir)
    print(json.dumps(rep, indent=2, ensure_ascii=False) if args.json else pretty_summary(rep))
    for msg in rep["issues"]:
        print(f"  - {msg}")

    if not args.resolve:
        sys.exit(0 if rep["passed"] else 1)

    settings = Settings.from_env(proxy_url=args.proxy_url, data_dir=args.data_dir)
    service = build_service(settings)
    repo = service.repository
    words = [w for n in repo.available_word_lengths() for w in repo.words_of_length(n)]

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    try:
        mismatches = asyncio.run(
            resolve_all(service, words, concurrency=max(1, args.concurrency), progress=progress))
    finally:
        service.close()

    for w, got in mismatches:
        shown = " ".join(got) if got else "<unresolved>"
        print(f"{w.characters}: recorded {' '.join(w.pinyin)}, resolved {shown}")
    print(f"{len(words)} word(s) checked, {len(mismatches)} disagreement(s)")

    sys.exit(0 if rep["passed"] and not mismatches else 1)


if __name__ == "__main__":
    main()
