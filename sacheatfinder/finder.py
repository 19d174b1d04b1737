"""Brute-force search for alphabetic strings whose JAMCRC matches a known cheat."""

from __future__ import annotations

import enum
import os
import sys
import time
import zlib
from operator import attrgetter
from typing import Optional, TextIO, Union

from .result import Result

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

CHEAT_CODES: tuple[int, ...] = (
    0xDE4B237D, 0xB22A28D1, 0x5A783FAE, 0xEECCEA2B, 0x42AF1E28, 0x555FC201, 0x2A845345, 0xE1EF01EA, 0x771B83FC, 0x5BF12848, 0x44453A17,
    0xFCFF1D08, 0xB69E8532, 0x8B828076, 0xDD6ED9E9, 0xA290FD8C, 0x3484B5A7, 0x43DB914E, 0xDBC0DD65, 0xD08A30FE, 0x37BF1B4E, 0xB5D40866,
    0xE63B0D99, 0x675B8945, 0x4987D5EE, 0x2E8F84E8, 0x1A9AA3D6, 0xE842F3BC, 0x0D5C6A4E, 0x74D4FCB1, 0xB01D13B8, 0x66516EBC, 0x4B137E45,
    0x78520E33, 0x3A577325, 0xD4966D59, 0x5FD1B49D, 0xA7613F99, 0x1792D871, 0xCBC579DF, 0x4FEDCCFF, 0x44B34866, 0x2EF877DB, 0x2781E797,
    0x2BC1A045, 0xB2AFE368, 0xFA8DD45B, 0x8DED75BD, 0x1A5526BC, 0xA48A770B, 0xB07D3B32, 0x80C1E54B, 0x5DAD0087, 0x7F80B950, 0x6C0FA650,
    0xF46F2FA4, 0x70164385, 0x885D0B50, 0x151BDCB3, 0xADFA640A, 0xE57F96CE, 0x040CF761, 0xE1B33EB9, 0xFEDA77F7, 0x8CA870DD, 0x9A629401,
    0xF53EF5A5, 0xF2AA0C1D, 0xF36345A8, 0x8990D5E1, 0xB7013B1B, 0xCAEC94EE, 0x31F0C3CC, 0xB3B3E72A, 0xC25CDBFF, 0xD5CF4EFF, 0x680416B1,
    0xCF5FDA18, 0xF01286E9, 0xA841CC0A, 0x31EA09CF, 0xE958788A, 0x02C83A7C, 0xE49C3ED4, 0x171BA8CC, 0x86988DAE, 0x2BDD2FA1,
)

CHEAT_NAMES: tuple[str, ...] = (
    "Weapon Set 1",
    "Weapon Set 2",
    "Weapon Set 3",
    "Health, Armor, $250k, Repairs car",
    "Increase Wanted Level +2",
    "Clear Wanted Level",
    "Sunny Weather",
    "Very Sunny Weather",
    "Overcast Weather",
    "Rainy Weather",
    "Foggy Weather",
    "Faster Clock",
    "N°12",
    "N°13",
    "People attack each other with golf clubs",
    "Have a bounty on your head",
    "Everyone is armed",
    "Spawn Rhino",
    "Spawn Bloodring Banger",
    "Spawn Rancher",
    "Spawn Racecar",
    "Spawn Racecar",
    "Spawn Romero",
    "Spawn Stretch",
    "Spawn Trashmaster",
    "Spawn Caddy",
    "Blow Up All Cars",
    "Invisible car",
    "All green lights",
    "Aggressive Drivers",
    "Pink CArs",
    "Black Cars",
    "Fat Body",
    "Muscular Body",
    "Skinny Body",
    "People attack with Rocket Launchers",
    "N°41",
    "N°42",
    "Gangs Control the Streets",
    "N°44",
    "Slut Magnet",
    "N°46",
    "N°47",
    "Cars Fly",
    "N°49",
    "N°50",
    "Spawn Vortex Hovercraft",
    "Smash n' Boom",
    "N°53",
    "N°54",
    "N°55",
    "Orange Sky",
    "Thunderstorm",
    "Sandstorm",
    "N°59",
    "N°60",
    "Infinite Health",
    "Infinite Oxygen",
    "Have Parachute",
    "N°64",
    "Never Wanted",
    "N°66",
    "Mega Punch",
    "Never Get Hungry",
    "N°69",
    "N°70",
    "N°71",
    "N°72",
    "Full Weapon Aiming While Driving",
    "N°74",
    "Traffic is Country Vehicles",
    "Recruit Anyone (9mm)",
    "Get Born 2 Truck Outfit",
    "N°78",
    "N°79",
    "N°80",
    "L3 Bunny Hop",
    "N°82",
    "N°83",
    "N°84",
    "Spawn Quad",
    "Spawn Tanker Truck",
    "Spawn Dozer",
    "pawn Stunt Plane",
    "Spawn Monster",
)


def _build_lookup() -> dict[int, str]:
    lookup: dict[int, str] = {}
    for crc, name in zip(CHEAT_CODES, CHEAT_NAMES):
        lookup.setdefault(crc, name)
    return lookup


_CHEAT_LOOKUP = _build_lookup()

_MASK32 = 0xFFFFFFFF


class ComputeType(enum.IntEnum):
    """The ways a search can be carried out."""

    STD_THREAD = 0
    OPENMP = 1
    CUDA = 2
    OPENCL = 3


def jamcrc(data: Union[str, bytes], previous_crc: int = 0) -> int:
    """Return the JAMCRC (CRC-32 without the final inversion) of ``data``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return ~zlib.crc32(data, previous_crc & _MASK32) & _MASK32


def generate_string(n: int) -> str:
    """Return the alphabetic sequence for ``n``, least significant letter first.

    Values below 26 map straight onto a single letter; larger values use
    bijective base 26.
    """
    if n < 0:
        raise ValueError(f"index must not be negative: {n}")
    if n < 26:
        return ALPHABET[n]
    letters = []
    while n:
        n -= 1
        letters.append(ALPHABET[n % 26])
        n //= 26
    return "".join(letters)


def max_thread_support() -> int:
    """Return the number of threads the machine can run at once."""
    return os.cpu_count() or 1


class CheatFinder:
    """Searches an index range for sequences that match a known cheat JAMCRC.

    This base finder checks every index in order on the calling thread.
    """

    mode_name = "sequential"
    built_with_openmp = True
    built_with_cuda = False
    built_with_opencl = False

    def __init__(
        self,
        min_range: int = 0,
        max_range: int = 0,
        thread_count: Optional[int] = None,
        cuda_block_size: int = 64,
        out: Optional[TextIO] = None,
    ) -> None:
        self.min_range = min_range
        self.max_range = max_range
        self.thread_count = max_thread_support() if thread_count is None else thread_count
        self.cuda_block_size = cuda_block_size
        self.out = out
        self.results: list[Result] = []
        self.begin_time = time.perf_counter()
        self.end_time = self.begin_time
        self.is_running = False

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def _check_range(self) -> None:
        if self.min_range < 0 or self.max_range < 0:
            raise ValueError("Range values must not be negative")
        if self.min_range > self.max_range:
            raise ValueError(
                f"Min range value: '{self.min_range}' can't be greater than "
                f"Max range value: '{self.max_range}'"
            )
        if self.max_range - self.min_range < 1:
            raise ValueError(
                f"Search range is too small. Min range value: '{self.min_range}' "
                f"Max range value: '{self.max_range}'"
            )

    def _search(self) -> None:
        for i in range(self.min_range, self.max_range + 1):
            self.runner(i)

    def run(self) -> None:
        """Search the whole range, sort the matches by index and print them."""
        out = self._stream()
        print(f"Running with {self.mode_name} mode", file=out)
        print(f"Max thread support: {max_thread_support()}", file=out)
        print(f"Running with: {self.thread_count} threads", file=out)
        self._check_range()
        print(f"Number of calculations: {self.max_range - self.min_range}", file=out)

        self.is_running = True
        try:
            print(
                f"From: {generate_string(self.min_range)} to: "
                f"{generate_string(self.max_range)} Alphabetic sequence",
                file=out,
            )
            self.begin_time = time.perf_counter()
            self._search()
            self.end_time = time.perf_counter()
            self.results.sort(key=attrgetter("index"))
            self.print_result(out)
        finally:
            self.is_running = False

    def runner(self, i: int) -> Optional[Result]:
        """Check index ``i``; record and return a result when it matches a cheat."""
        sequence = generate_string(i)
        crc = jamcrc(sequence)
        name = _CHEAT_LOOKUP.get(crc)
        if name is None:
            return None
        found = Result(i, sequence[::-1], crc, name)
        self.results.append(found)
        return found

    def clear(self) -> None:
        """Forget every result found so far."""
        self.results.clear()

    def format_results(self) -> str:
        """Return the result table with timing and throughput lines."""
        width = 18
        lines = [
            "",
            f"{'Iter. N°':>{width + 4}}{'Code':>{width + 3}}"
            f"{'JAMCRC value':>{width + 11}}{'Associated code':>{width + 16}}",
        ]
        lines.extend(
            f"{r.index:>{width + 2}}{r.code:>{width + 5}}{'0x':>{width}}"
            f"{r.jamcrc:x}{r.associated_code:>{width + 20}}"
            for r in self.results
        )
        elapsed = self.end_time - self.begin_time
        lines.append(f"Time: {elapsed:g} sec")
        calculations = self.max_range - self.min_range
        rate = calculations / elapsed / 1_000_000 if elapsed > 0 else float("inf")
        lines.append(f"This program execute: {rate:.6f} MOps/sec")
        lines.append("")
        lines.append(f"Number of results: {len(self.results)}")
        return "\n".join(lines) + "\n"

    def print_result(self, file: Optional[TextIO] = None) -> None:
        """Write the result table to ``file`` (standard output by default)."""
        stream = file if file is not None else self._stream()
        stream.write(self.format_results())