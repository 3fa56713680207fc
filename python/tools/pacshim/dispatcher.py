#!/usr/bin/env python3
"""
Rendering and execution of native package manager commands.

Commands are executed as argument vectors, never through a shell, so package
names reach the native tool exactly as typed.
"""

from __future__ import annotations

import glob
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Dict, List

from loguru import logger

from .exceptions import CommandError
from .models import CommandResult, CommandTemplate, ParsedRequest

GLOB_CHARS = frozenset("*?[")


def _placeholders(request: ParsedRequest) -> Dict[str, List[str]]:
    return {
        "{packages}": list(request.packages),
        "{tool_option}": request.tool_option.split(),
        "{force}": request.force.split(),
        "{verbose}": request.verbose.split(),
    }


def _expand(token: str, values: Dict[str, List[str]]) -> List[str]:
    if token in values:
        return values[token]
    if GLOB_CHARS.intersection(token):
        # An unmatched pattern expands to nothing.
        return sorted(glob.glob(token))
    return [token]


def render(template: CommandTemplate, request: ParsedRequest) -> List[List[str]]:
    """
    Turn a template into concrete argument vectors.

    Unrecognised flags from the command line are appended to the last step.
    """
    values = _placeholders(request)
    steps = [
        [arg for token in step for arg in _expand(token, values)]
        for step in template.steps
    ]
    if steps:
        steps[-1].extend(request.extra_flags)
    return steps


def run_command(command: List[str]) -> CommandResult:
    """
    Execute one command with inherited stdin/stdout/stderr.

    Raises:
        CommandError: If the executable cannot be started
    """
    logger.debug(f"Executing command: {' '.join(command)}")
    try:
        process = subprocess.run(command, check=False)
    except OSError as e:
        raise CommandError(command, e.strerror or str(e)) from e

    return_code = process.returncode
    if return_code < 0:
        # Killed by a signal: report it the way a shell does.
        logger.debug(f"Command {' '.join(command)} killed by signal {-return_code}")
        return_code = 128 - return_code
    elif return_code != 0:
        logger.debug(f"Command {' '.join(command)} exited with code {return_code}")

    return {
        "success": return_code == 0,
        "command": command,
        "return_code": return_code,
    }


def dispatch(steps: Sequence[List[str]]) -> CommandResult:
    """
    Run rendered steps in order, stopping at the first failing one.

    Returns:
        The result of the last step that ran
    """
    result: CommandResult = {"success": True, "command": [], "return_code": 0}
    for command in steps:
        result = run_command(command)
        if not result["success"]:
            break
    return result


def passthrough(pacman: Path, argv: Sequence[str]) -> int:
    """Forward argv untouched to the native pacman and return its exit code."""
    return run_command([str(pacman), *argv])["return_code"]
