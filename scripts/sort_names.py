"""
Print names as a table sorted by last name.

Names come from the command line, from a file with one name per line, or from a
built-in sample list when neither is given:

    python scripts/sort_names.py "William Shakespeare" "The Environmental Protection Agency"
    python scripts/sort_names.py --names_path authors.txt --org-word Press --no-honorifics
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).parent.parent))

from sortable_names.names import SortableNames, SortableNamesConfig, SortedName
from sortable_names.names_data import (
    DEFAULT_ARTICLES,
    DEFAULT_HONORIFICS,
    DEFAULT_NAME_SUFFIXES,
    DEFAULT_ORG_WORDS,
)

SAMPLE_NAMES = [
    "Daniel O'Mahony",
    "Auður Ava Ólafsdóttir",
    "Homer",
    "William Shakespeare",
    "Elizabeth von Arnim",
    "Mary Wollstonecraft Shelley",
    "T. Smollett",
    "Rubén Darío",
    "Sir Richard Francis Burton",
    "Martin Luther King Jr.",
    "Annie-B Parson",
    "Edward Bulwer-Lytton",
    "U.S. Government Accountability Office",
    "The Environmental Protection Agency",
]


def build_config(args: argparse.Namespace) -> SortableNamesConfig:
    return SortableNamesConfig(
        articles=() if args.no_articles else DEFAULT_ARTICLES + tuple(args.article),
        org_words=() if args.no_org_words else DEFAULT_ORG_WORDS + tuple(args.org_word),
        honorifics=() if args.no_honorifics else DEFAULT_HONORIFICS + tuple(args.honorific),
        name_suffixes=() if args.no_suffixes else DEFAULT_NAME_SUFFIXES + tuple(args.suffix),
    )


def read_names(args: argparse.Namespace) -> List[str]:
    if args.names_path:
        with open(args.names_path, encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    return args.names or SAMPLE_NAMES


def format_table(entries: List[SortedName]) -> str:
    width = max([len("Formatted")] + [len(entry.sortable) for entry in entries])
    lines = [f"{'Formatted':<{width}}  Original", f"{'-' * width}  {'-' * 8}"]
    lines.extend(f"{entry.sortable:<{width}}  {entry.name}" for entry in entries)
    return "\n".join(lines)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Sort names alphabetically by last name.")
    parser.add_argument("names", nargs="*", help="Names to sort. Defaults to a sample list.")
    parser.add_argument("--names_path", type=str, default=None, help="File with one name per line.")
    parser.add_argument("--article", action="append", default=[], help="Extra leading article fragment.")
    parser.add_argument("--org-word", action="append", default=[], help="Extra organization word fragment.")
    parser.add_argument("--honorific", action="append", default=[], help="Extra honorific fragment.")
    parser.add_argument("--suffix", action="append", default=[], help="Extra name suffix fragment.")
    parser.add_argument("--no-articles", action="store_true", help="Never move leading articles.")
    parser.add_argument("--no-org-words", action="store_true", help="Treat every name as a person.")
    parser.add_argument("--no-honorifics", action="store_true", help="Keep leading titles.")
    parser.add_argument("--no-suffixes", action="store_true", help="Do not treat any token as a suffix.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    sortable = SortableNames(build_config(args))
    print(format_table(sortable.sort_names(read_names(args))))
