"""
Scrape past Wordle answers from wordlehints.co.uk for the past-answer weights.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Orders rows by date (oldest first), so line i is the answer of Wordle #i+1.
- Lowercases and writes one answer per line.

Usage:
    python -m script.extract_wordle_answers --out data/past_answers.txt
"""

import argparse
import logging
import re

import requests
from bs4 import BeautifulSoup

from wordlehelper.datasets import write_lines
from wordlehelper.history import ORIGIN

log = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(text: str) -> list[str]:
    """
    Extract (date, answer) rows, keep one answer per date and return them in
    calendar order starting at the first Wordle.
    """
    by_date = {}
    for m in ROW_RE.finditer(text):
        by_date.setdefault(m.group(1), m.group(2).lower())
    first = ORIGIN.date().isoformat()
    dates = sorted(d for d in by_date if d >= first)
    if dates and dates[0] != first:
        log.warning(f"history starts at {dates[0]}, not {first}; indices will be shifted")
    return [by_date[d] for d in dates]


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    return parse_answers(soup.get_text("\n", strip=True))


def main():
    ap = argparse.ArgumentParser(description="Extract past Wordle answers in calendar order")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/past_answers.txt")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    answers = fetch_answers(args.url)
    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} past answers -> {args.out}")


if __name__ == "__main__":
    main()
