#!/usr/bin/env python3
"""
Data models for pacshim
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, TypedDict


class HostKind(Enum):
    """Native package manager family found on the host"""

    PACMAN = "pacman"
    DPKG = "dpkg"
    YUM = "yum"
    HOMEBREW = "homebrew"
    PORTAGE = "portage"
    UNKNOWN = "unknown"


class PrimaryOperation(Enum):
    """Top-level pacman verb"""

    QUERY = "Q"
    SYNC = "S"
    REMOVE = "R"
    UPGRADE = "U"


@dataclass(frozen=True, slots=True)
class ParsedRequest:
    """
    Accumulated state of one invocation.

    Instances are immutable; the option parser produces a new one for every
    folded flag.
    """

    primary: Optional[PrimaryOperation] = None
    secondary: str = ""
    tool_option: str = ""
    force: str = ""
    verbose: str = ""
    packages: Tuple[str, ...] = ()
    extra_flags: Tuple[str, ...] = ()
    help_requested: bool = False
    version_requested: bool = False
    matrix_requested: bool = False

    @property
    def short_circuit(self) -> bool:
        """True once a flag asked to print something and exit."""
        return self.help_requested or self.version_requested or self.matrix_requested

    @property
    def operation(self) -> str:
        """Combined primary+secondary key, e.g. ``Suy``; empty without a primary."""
        if self.primary is None:
            return ""
        return self.primary.value + self.secondary


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """
    Static argv pattern for one (host, operation) pair.

    ``steps`` run in order and stop at the first failure.
    """

    steps: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *commands: str) -> CommandTemplate:
        """Build a template from whitespace separated command lines."""
        return cls(steps=tuple(tuple(command.split()) for command in commands))

    def __str__(self) -> str:
        return " && ".join(" ".join(step) for step in self.steps)


class CommandResult(TypedDict):
    """Type definition for command execution results"""

    success: bool
    command: List[str]
    return_code: int
