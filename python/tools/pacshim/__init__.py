#!/usr/bin/env python3
"""
pacshim - pacman syntax for every package manager

Translates pacman-style operations (-Q, -S, -R, -U and their modifiers) into
the equivalent command of the host's native package manager: apt/dpkg,
yum/rpm, Homebrew or Portage. On Arch Linux the arguments go to pacman
unchanged.

License:
    GPL-3.0-or-later
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0-or-later"

from .cli import CLI
from .commands import COMMAND_TABLE, KNOWN_UNSUPPORTED, resolve, support_matrix
from .config import ShimConfig
from .dispatcher import dispatch, passthrough, render
from .exceptions import (
    PacshimError,
    ConflictingPrimaryOperationError,
    MissingDependencyError,
    UnsupportedHostError,
    UnsupportedOperationError,
    MissingRequiredArgumentError,
    MixedScopeRequestError,
    NoOperationError,
    ConfigError,
    CommandError,
)
from .host import detect_host
from .models import CommandResult, CommandTemplate, HostKind, ParsedRequest, PrimaryOperation
from .parser import ParseContext, fold, parse_args
from .validation import validate

__all__ = [
    # Entry points
    "CLI",
    "ShimConfig",

    # Pipeline
    "detect_host",
    "parse_args",
    "fold",
    "ParseContext",
    "validate",
    "resolve",
    "render",
    "dispatch",
    "passthrough",
    "support_matrix",
    "COMMAND_TABLE",
    "KNOWN_UNSUPPORTED",

    # Data models
    "HostKind",
    "PrimaryOperation",
    "ParsedRequest",
    "CommandTemplate",
    "CommandResult",

    # Exceptions
    "PacshimError",
    "ConflictingPrimaryOperationError",
    "MissingDependencyError",
    "UnsupportedHostError",
    "UnsupportedOperationError",
    "MissingRequiredArgumentError",
    "MixedScopeRequestError",
    "NoOperationError",
    "ConfigError",
    "CommandError",
]
