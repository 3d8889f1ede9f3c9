"""
Build the CRLF word list the suggestion engine loads.

What it does:
- Reads a plain word list from a local file (--in) or downloads one (--url).
- Keeps lowercase a–z tokens of exactly N letters (input is lowercased first).
- De-duplicates while preserving source order (optionally sorts).
- Writes one word per line, CRLF-delimited, no trailing delimiter.
- Prints the validator summary for the written file.

Usage:
    python -m script.build_dictionary --in words.txt
    python -m script.build_dictionary --url https://example.org/words.txt --sort \
        --out wordle_guesser/datasets/data/five_letter_words.txt
"""

import argparse
from pathlib import Path

import requests

from wordle_guesser.datasets import validate_dictionary, pretty_summary, write_dictionary
from wordle_guesser.datasets.io import BUNDLED_DICTIONARY_PATH


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, N: int) -> list[str]:
    words = (ln.strip().lower() for ln in lines)
    return unique_preserve_order(w for w in words if len(w) == N and w.isascii() and w.isalpha())


def fetch_lines(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build a CRLF dictionary for the guess helper")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="local word list (any line endings)")
    src.add_argument("--url", help="download the word list from this URL")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", default=str(BUNDLED_DICTIONARY_PATH))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args(argv)

    if args.inp:
        inp = Path(args.inp)
        if not inp.exists():
            raise FileNotFoundError(inp)
        lines = inp.read_text(encoding="utf-8").splitlines()
    else:
        lines = fetch_lines(args.url)

    words = clean_words(lines, args.N)
    if args.sort:
        words = sorted(words)

    write_dictionary(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")
    print(pretty_summary(validate_dictionary(args.out, args.N)))


if __name__ == "__main__":
    main()
