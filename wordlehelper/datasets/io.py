from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordlehelper.config import WORD_LENGTH

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str) -> List[str]:
    """
    Load a word list: lowercased, blanks and non 5-letter tokens dropped,
    duplicates removed, file order kept.
    """
    words = [ln.strip().lower() for ln in read_lines(p)]
    out = list(dict.fromkeys(w for w in words if len(w) == WORD_LENGTH and w.isalpha()))
    log.info(f"loaded {len(out)} words from {p}")
    return out


def load_answers_by_date(p: Path | str) -> List[str]:
    """
    Load past answers in calendar order (index 0 = Wordle #1). Unlike
    load_words, repeats are kept so positions stay aligned with dates.
    """
    return [ln.strip().lower() for ln in read_lines(p) if ln.strip()]
