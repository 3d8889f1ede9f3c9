# apps/cli/suggest.py
"""
CLI entry point for word suggestions.

Three ways to ask:
  1) explicit constraints
       python -m apps.cli.suggest --state C__NE --exclude DUOG --unplaced A --placement _A___
  2) game feedback (guess:pattern, pattern of G/Y/-)
       python -m apps.cli.suggest --history crane:--Y-G --history sloth:-----
     or, with a known answer, bare guesses are scored for you:
       python -m apps.cli.suggest --answer civic --history crane --history moist
  3) batch: one JSON request per line in, one JSON response per line out
       python -m apps.cli.suggest --requests reqs.jsonl --out resp.jsonl

Exit codes: 0 ok, 1 dictionary unreadable, 2 malformed input or bad setting.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from wordle_guesser.config import Settings
from wordle_guesser.datasets import validate_dictionary, pretty_summary
from wordle_guesser.datasets.io import BUNDLED_DICTIONARY_PATH, read_dictionary
from wordle_guesser.engine import generate_guesses, constraints_from_history, score
from wordle_guesser.errors import ConfigError, DecodeError, MalformedInput
from wordle_guesser.service import handle_request, setup_logging


def _parse_history(entries: List[str], answer: str | None) -> List[Tuple[str, str]]:
    """
    "crane:--Y-G" -> ("crane", "--Y-G"); a bare "crane" needs --answer to be scored.
    """
    history = []
    for entry in entries:
        guess, sep, pattern = entry.partition(":")
        if not sep:
            if answer is None:
                raise MalformedInput(f"history entry {entry!r} has no pattern; "
                                     f"use guess:pattern or pass --answer")
            if len(guess) != len(answer):
                raise MalformedInput(f"guess {guess!r} and answer {answer!r} differ in length")
            pattern = score(guess, answer)
        history.append((guess, pattern))
    return history


def _run_batch(path: str, out: str | None, *, dictionary, settings: Settings,
               progress: str) -> int:
    lines = [ln for ln in Path(path).read_text(encoding="utf-8").splitlines() if ln.strip()]
    total = len(lines)

    mode = progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(lines, ncols=80, desc="Suggesting", unit="req") if mode == "bar" else lines
    results: List[Dict] = []
    start = time.time()
    for idx, line in enumerate(iterator, 1):
        status, body = handle_request(line, dictionary=dictionary, settings=settings)
        results.append({"status": status, **json.loads(body)})
        if mode == "plain" and (idx == total or idx % 100 == 0):
            sys.stderr.write(f"\r[{idx}/{total}] elapsed {time.time() - start:6.1f}s")
            sys.stderr.flush()
    if mode == "plain" and total:
        sys.stderr.write("\n")

    text = "\n".join(json.dumps(r) for r in results) + ("\n" if results else "")
    if out:
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        Path(out).write_text(text, encoding="utf-8")
        print(f"Wrote: {out} ({total} responses)")
    else:
        sys.stdout.write(text)

    return 0 if all(r["status"] == 200 for r in results) else 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle guesser: list words that fit what you know")
    ap.add_argument("--state", default="_____",
                    help="known letters with '_' for unknown positions, e.g. C__NE")
    ap.add_argument("--exclude", default="", help="letters known to be absent, e.g. DUOG")
    ap.add_argument("--unplaced", default="", help="letters present but not yet placed, e.g. A")
    ap.add_argument("--placement", action="append", default=[],
                    help="mask ruling a letter out of a position, e.g. _A___ (repeatable)")
    ap.add_argument("--history", action="append", default=[],
                    help="feedback as guess:pattern with G/Y/- (repeatable); overrides "
                         "--state/--exclude/--unplaced/--placement")
    ap.add_argument("--answer", help="score bare --history guesses against this word")
    ap.add_argument("--requests", help="JSONL file of requests (batch mode)")
    ap.add_argument("--out", help="batch output file (default: stdout)")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="batch progress display (auto=bar on a terminal, else plain text)")
    ap.add_argument("--dictionary", help="CRLF word list (default: bundled list)")
    ap.add_argument("--workers", type=int, help="filter threads (default: min(8, cpus))")
    ap.add_argument("--word-length", type=int, help="word length (default: 5)")
    ap.add_argument("--validate", action="store_true",
                    help="print a dictionary health summary before suggesting")
    ap.add_argument("--json", action="store_true", help="print the response as JSON")
    ap.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse args, load the dictionary, print suggestions. Returns the exit code.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        env = Settings.from_env()
        settings = Settings(
            dictionary_path=args.dictionary or env.dictionary_path,
            word_length=args.word_length if args.word_length is not None else env.word_length,
            workers=args.workers if args.workers is not None else env.workers,
            chunk_size=env.chunk_size,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    dict_path = settings.dictionary_path or str(BUNDLED_DICTIONARY_PATH)

    if args.validate:
        print(pretty_summary(validate_dictionary(dict_path, settings.word_length)))

    try:
        dictionary = read_dictionary(dict_path)
    except (FileNotFoundError, DecodeError) as e:
        print(f"error: cannot load dictionary {dict_path}: {e}", file=sys.stderr)
        return 1

    if args.requests:
        return _run_batch(args.requests, args.out, dictionary=dictionary, settings=settings,
                          progress=args.progress)

    try:
        if args.history:
            fields = constraints_from_history(_parse_history(args.history, args.answer),
                                              settings.word_length)
        else:
            fields = {
                "current_state": args.state,
                "excluded_letters": list(args.exclude),
                "unplaced_letters": list(args.unplaced),
                "excluded_placements": args.placement,
            }
        guesses = generate_guesses(
            fields["current_state"],
            fields["excluded_letters"],
            fields["unplaced_letters"],
            fields["excluded_placements"],
            dictionary=dictionary,
            workers=settings.workers,
            chunk_size=settings.chunk_size,
            word_length=settings.word_length,
        )
    except MalformedInput as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps({"word_suggestions": guesses}))
    else:
        for g in guesses:
            print(g)
        print(f"{len(guesses)} suggestion(s)", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
