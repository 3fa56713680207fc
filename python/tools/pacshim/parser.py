#!/usr/bin/env python3
"""
Pacman-style option parsing.

Parsing is a left-to-right fold of single-letter flags over an immutable
``ParsedRequest``. ``fold`` is pure apart from the yum plugin probe that
``-w`` triggers, which is injected through ``ParseContext``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace

from loguru import logger

from .exceptions import ConflictingPrimaryOperationError, MissingDependencyError
from .models import HostKind, ParsedRequest, PrimaryOperation

PRIMARY_FLAGS = {op.value: op for op in PrimaryOperation}
OVERWRITE_FLAGS = frozenset("slipqom")

TOOL_OPTIONS = {
    HostKind.DPKG: "-d",
    HostKind.YUM: "--downloadonly",
    HostKind.PORTAGE: "--fetchonly",
}

FORCE_OPTIONS = {
    HostKind.DPKG: "--force-yes -y",
    HostKind.YUM: "-y",
    HostKind.PORTAGE: "",
}
# Hosts without an entry above get the yum-style value.
DEFAULT_FORCE = "-y"

VERBOSE_OPTION = "-v"


def _always_available() -> bool:
    return True


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Host facts the parser needs while folding flags."""

    host: HostKind
    downloadonly_available: Callable[[], bool] = _always_available


def initial_request(host: HostKind) -> ParsedRequest:
    """Empty request carrying the host's default force string."""
    if host is HostKind.PORTAGE:
        return ParsedRequest(force="--ask")
    return ParsedRequest()


def fold_secondary(secondary: str, flag: str) -> str:
    """Fold one modifier letter into the current secondary code."""
    match flag:
        case "u":
            return "uy" if secondary.startswith("y") else "u"
        case "y":
            return "uy" if secondary.startswith("u") else "y"
        case "c":
            if secondary in ("cc", "ccc"):
                return "ccc"
            return "cc" if secondary.startswith("c") else "c"
        case _ if flag in OVERWRITE_FLAGS:
            return flag
    raise ValueError(f"Not a secondary flag: {flag!r}")


def fold(request: ParsedRequest, flag: str, context: ParseContext) -> ParsedRequest:
    """
    Apply a single flag letter to a request.

    Args:
        request: Current state
        flag: One option letter, without the leading dash
        context: Host facts

    Returns:
        The new request state

    Raises:
        ConflictingPrimaryOperationError: If a different primary is already set
        MissingDependencyError: If ``-w`` is used on yum without its plugin
    """
    if flag in PRIMARY_FLAGS:
        primary = PRIMARY_FLAGS[flag]
        if request.primary is not None and request.primary is not primary:
            raise ConflictingPrimaryOperationError(request.primary.value, flag)
        return replace(request, primary=primary)

    if flag in OVERWRITE_FLAGS or flag in "uyc":
        return replace(request, secondary=fold_secondary(request.secondary, flag))

    match flag:
        case "w":
            if context.host is HostKind.YUM and not context.downloadonly_available():
                raise MissingDependencyError(
                    "-w requires the yum downloadonly plugin (yum-downloadonly)",
                    dependency="yum-downloadonly",
                )
            return replace(request, tool_option=TOOL_OPTIONS.get(context.host, request.tool_option))
        case "f":
            return replace(request, force=FORCE_OPTIONS.get(context.host, DEFAULT_FORCE))
        case "v":
            return replace(request, verbose=VERBOSE_OPTION)
        case "h":
            return replace(request, help_requested=True)
        case "V":
            return replace(request, version_requested=True)
        case "P":
            return replace(request, matrix_requested=True)

    logger.debug(f"Forwarding unrecognised flag -{flag}")
    return replace(request, extra_flags=request.extra_flags + (f"-{flag}",))


def tokenize(argv: Sequence[str]) -> Iterator[tuple[str, str]]:
    """
    Split argv into ``("flag", letter)``, ``("long", option)`` and
    ``("arg", value)`` tokens. Everything after ``--`` is an argument.
    """
    only_args = False
    for arg in argv:
        if only_args or arg == "-" or not arg.startswith("-"):
            yield "arg", arg
        elif arg == "--":
            only_args = True
        elif arg.startswith("--"):
            yield "long", arg
        else:
            for letter in arg[1:]:
                yield "flag", letter


def parse_args(argv: Sequence[str], context: ParseContext) -> ParsedRequest:
    """
    Build a ParsedRequest from the raw argument list.

    Parsing stops at the first flag that asks to print something and exit
    (``-h``, ``-V``, ``-P``).
    """
    request = initial_request(context.host)
    packages: list[str] = []

    for kind, value in tokenize(argv):
        match kind:
            case "flag":
                request = fold(request, value, context)
                if request.short_circuit:
                    break
            case "long":
                logger.debug(f"Forwarding long option {value}")
                request = replace(request, extra_flags=request.extra_flags + (value,))
            case "arg":
                packages.append(value)

    request = replace(request, packages=tuple(packages))
    logger.debug(f"Parsed request: {request}")
    return request
