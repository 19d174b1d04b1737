"""Command-line entry point for the cheat search."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from .backends import ProcessFinder, ThreadFinder
from .finder import CheatFinder, ComputeType

USAGE = (
    "Syntax: GTA_SA_cheat_finder --min <from (uint64_t)> --max "
    "<to (uint64_t)>--calc-mode <0-2> 0: std::thread, 1: OpenMP, 2: CUDA>"
)

_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")


def _parse_number(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    match = _LEADING_NUMBER.match(text)
    return int(match.group(1)) if match else None


def _finder_for(mode: int) -> Optional[CheatFinder]:
    if mode == ComputeType.CUDA:
        print("CUDA not supported")
        return None
    if mode == ComputeType.OPENMP:
        return ProcessFinder()
    return ThreadFinder()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the options, run the search and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    settings = {"--min": 0, "--max": 0, "--calc-mode": 0}

    it = iter(args)
    for arg in it:
        if arg in ("-h", "--help"):
            print(USAGE)
            return 0
        if arg in settings:
            value = _parse_number(next(it, None))
            if value is None:
                print("Error, non-numeric character !")
                return 1
            settings[arg] = value
        elif arg == "--cli":
            continue
        else:
            print(f"Unknown argument: {arg}")

    finder = _finder_for(settings["--calc-mode"])
    if finder is None:
        print("Error, no finder for this compute mode")
        return 1
    finder.min_range = settings["--min"]
    finder.max_range = settings["--max"]

    try:
        finder.run()
    except ValueError as error:
        print(error)
    return 0


if __name__ == "__main__":
    sys.exit(main())