"""
Curses key codes bound to the hex view commands.
"""

import curses
from dataclasses import dataclass, field
from typing import FrozenSet

ESCAPE_KEY = 27


def ctrl(char: str) -> int:
    """Key code of Ctrl + the given letter."""

    return ord(char) & 0x1f


@dataclass(frozen=True)
class KeyBindings:
    """Key codes bound to the mode-changing commands."""

    enter_edit: FrozenSet[int] = field(
        default_factory=lambda: frozenset({ctrl('e'), curses.KEY_IC, ord('i')})
    )
    exit_edit: FrozenSet[int] = field(
        default_factory=lambda: frozenset({ESCAPE_KEY, ctrl('e')})
    )
    toggle_selection: FrozenSet[int] = field(
        default_factory=lambda: frozenset({ord('v')})
    )
    cancel: FrozenSet[int] = field(
        default_factory=lambda: frozenset({ESCAPE_KEY})
    )
