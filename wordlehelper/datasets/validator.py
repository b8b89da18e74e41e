"""
Word list validator for wordlehelper.

What this module does:
- Validate the two word lists the solver is started with: the POSSIBLE answers
  list (canonical past/likely answers) and the ALLOWED list (guess-only words
  the game also accepts).
- Enforce formatting rules (lowercase, a-z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report how much the two lists overlap. They are normally disjoint and the
  guess universe is their union, so overlap is informational, not a failure.

Typical use:
    from wordlehelper.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/possible.txt", "data/allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlehelper.config import WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (possible, allowed) pair."""
    possible: FileReport
    allowed: FileReport
    overlap: int         # words present in both lists
    guess_universe: int  # size of the de-duplicated union
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a-z
      - must have exactly 5 letters
      - blank lines are ignored (trailing newlines are common)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w.islower() and w.isascii() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(possible_path: str, allowed_path: str) -> Dict:
    """
    Validate the possible/allowed word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - overlap between the lists and the union size
          - `passed` boolean (strict: both non-empty, no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    pos_p = Path(possible_path)
    all_p = Path(allowed_path)

    # Early return if either file is missing
    if not pos_p.exists() or not all_p.exists():
        if not pos_p.exists():
            issues.append(f"possible file not found: {possible_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            possible=FileReport(possible_path, pos_p.exists(), 0, "", 0, 0),
            allowed=FileReport(allowed_path, all_p.exists(), 0, "", 0, 0),
            overlap=0,
            guess_universe=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    possible, pos_invalid = _load_and_check(pos_p)
    allowed, all_invalid = _load_and_check(all_p)
    pos_report = _file_report(pos_p, possible, pos_invalid)
    all_report = _file_report(all_p, allowed, all_invalid)

    overlap = len(set(possible) & set(allowed))

    # Empty-file guardrails (useful to catch bad paths or preprocessing bugs)
    if pos_report.count == 0:
        issues.append("possible file contains 0 valid words")
    if all_report.count == 0:
        issues.append("allowed file contains 0 valid words")

    # Invalid-line diagnostics
    if pos_invalid:
        issues.append(f"possible has {pos_invalid} invalid line(s)")
    if all_invalid:
        issues.append(f"allowed has {all_invalid} invalid line(s)")

    # Duplicate diagnostics (count vs unique_count mismatch)
    if pos_report.count != pos_report.unique_count:
        issues.append("possible contains duplicate lines")
    if all_report.count != all_report.unique_count:
        issues.append("allowed contains duplicate lines")

    passed = (
            pos_invalid == 0
            and all_invalid == 0
            and pos_report.count > 0
            and all_report.count > 0
    )

    rep = ValidationReport(
        possible=pos_report,
        allowed=all_report,
        overlap=overlap,
        guess_universe=len(set(possible) | set(allowed)),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        possible=2309 (uniq=2309, sha=abc123...) | allowed=10638 (uniq=10638, sha=def456...) | overlap=0 | guesses=12947 | OK
    """
    a = report["possible"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"possible={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| overlap={report['overlap']} | guesses={report['guess_universe']} | {status}"
    )
