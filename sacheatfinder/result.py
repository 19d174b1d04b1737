"""A single match found while searching for cheat codes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Result:
    """A matching sequence: its position, the code, its JAMCRC and the cheat name.

    Two results are equal when their index, code and JAMCRC agree; the
    associated cheat name takes no part in comparison or hashing.
    """

    index: int
    code: str
    jamcrc: int
    associated_code: str = field(default="", compare=False)