"""
Dataset validator for the suggestion dictionary.

The loader is deliberately permissive (it passes odd lines straight
through), so this module is where a word list gets audited before it is
bundled or pointed at via WORDLE_DICTIONARY.

What it checks:
- the file exists and decodes as UTF-8
- lines are CRLF-delimited
- every line is lowercase a–z with exact length N
- no duplicate words
- SHA-256 of the raw bytes (for manifests / change tracking)

Typical use:
    from wordle_guesser.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("wordle_guesser/datasets/data/five_letter_words.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import DELIMITER


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str
    N: int
    exists: bool
    count: int           # number of VALID words
    unique_count: int    # valid words after dedupe
    invalid_lines: int
    crlf: bool           # True if the file uses CRLF between every line
    sha256: str          # empty string if missing
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_bytes(raw: bytes) -> str:
    return hashlib.sha256(raw).hexdigest()


def _check_lines(text: str, N: int) -> Tuple[List[str], int]:
    """
    Split on the CRLF delimiter and sort lines into valid words / invalid count.

    A single trailing delimiter is tolerated; any other blank line is invalid.
    """
    lines = text.split(DELIMITER)
    if lines and lines[-1] == "":
        lines.pop()

    valid: List[str] = []
    invalid = 0
    for w in lines:
        if w.islower() and w.isalpha() and w.isascii() and len(w) == N:
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def validate_dictionary(path: str, N: int) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns a JSON-serializable dict (see DictionaryReport); `passed` is strict:
    non-empty, UTF-8, CRLF-delimited, no invalid lines and no duplicates.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, N, False, 0, 0, 0, False, "",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    raw = p.read_bytes()
    sha = _sha256_bytes(raw)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        rep = DictionaryReport(str(p), N, True, 0, 0, 0, False, sha,
                               issues=[f"not valid UTF-8: {e}"])
        return asdict(rep)

    # A bare LF anywhere means the file was not written with CRLF delimiters.
    crlf = text.count("\n") == text.count(DELIMITER)
    words, invalid = _check_lines(text, N)

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        crlf=crlf,
        sha256=sha,
    )

    if not crlf:
        rep.issues.append("lines are not CRLF-delimited")
    if rep.count == 0:
        rep.issues.append("dictionary contains 0 valid words")
    if invalid:
        rep.issues.append(f"dictionary has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("dictionary contains duplicate words")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-line console summary, e.g.
        N=5 | words=830 (uniq=830, invalid=0, sha=abc123...) | crlf=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | crlf={report['crlf']} | {status}"
    )
