#!/usr/bin/env python3
"""Generate quickfilter_core/analyzers/_foldtable.py.

Every code point in the Basic Multilingual Plane with a nonzero
canonical combining class folds to "".  Every lowercase code point
whose compatibility decomposition, once combining marks are dropped,
is a single ASCII letter folds to that letter.

Usage:
    python scripts/mkfold.py > quickfilter_core/analyzers/_foldtable.py
"""

from __future__ import annotations

import argparse
import string
import sys
import unicodedata
from collections import defaultdict
from typing import Dict, List

HEADER = '''"""Quickfilter accent-folding table.

Generated by scripts/mkfold.py; do not edit by hand.

Each entry is ``(replacement, codes)``. ``codes`` starts with the first
code point folded to ``replacement``; every later entry is the delta
from the previous code point.  A negative entry ``-n`` repeats the
preceding delta so that its run is ``n`` long.
"""
'''

# Shorter runs are written out in full
MIN_RUN = 3


def build_mapping(limit: int = 0x10000) -> Dict[str, List[int]]:
    """Group folded code points by replacement string."""
    groups: Dict[str, List[int]] = defaultdict(list)
    for code in range(limit):
        ch = chr(code)
        if unicodedata.combining(ch):
            groups[""].append(code)
            continue
        if not ch.islower() or ch in string.ascii_lowercase:
            continue
        decomposed = unicodedata.normalize("NFKD", ch)
        stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
        if len(stripped) == 1 and stripped in string.ascii_letters:
            groups[stripped.lower()].append(code)
    return groups


def encode_codes(codes: List[int]) -> List[int]:
    """Delta- and run-length encode a sorted list of code points."""
    deltas = [b - a for a, b in zip(codes, codes[1:])]
    encoded = [codes[0]]
    i = 0
    while i < len(deltas):
        run = 1
        while i + run < len(deltas) and deltas[i + run] == deltas[i]:
            run += 1
        if run >= MIN_RUN:
            encoded.extend([deltas[i], -run])
        else:
            encoded.extend(deltas[i:i + run])
        i += run
    return encoded


def render(groups: Dict[str, List[int]], width: int = 78) -> str:
    lines = [HEADER, "FOLD_TABLE = ("]
    for replacement in sorted(groups):
        lines.append(f"    ({replacement!r}, (".replace("'", '"'))
        line = "       "
        for number in encode_codes(sorted(groups[replacement])):
            item = f" {number},"
            if len(line) + len(item) > width:
                lines.append(line)
                line = "       "
            line += item
        lines.append(line)
        lines.append("    )),")
    lines.append(")")
    return "\n".join(lines) + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-o", "--output", help="write to file instead of stdout")
    args = parser.parse_args()

    text = render(build_mapping())
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
