#!/usr/bin/env python3
"""
Command-line interface for pacshim.
Detects the host, then either forwards to pacman or translates the request.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from loguru import logger

from .commands import SUPPORTED_HOSTS, is_known_unsupported, resolve, support_matrix
from .config import ShimConfig
from .dispatcher import dispatch, passthrough, render
from .exceptions import PacshimError, UnsupportedHostError, UnsupportedOperationError
from .host import detect_host
from .logging_config import setup_logging
from .models import HostKind, ParsedRequest
from .parser import ParseContext, parse_args
from .validation import validate

HELP_TEXT = """\
Usage: pacshim <operation> [options] [targets]

Operations:
  -Q [-c|-i|-l|-m|-o|-p|-u]   query the package database
  -S [-s|-u|-y|-uy|-c|-cc|-ccc]
                              install, search, refresh, upgrade or clean
  -R [-s]                     remove packages
  -U                          install from local package files

Options:
  -f    do not ask for confirmation
  -v    verbose output from the native tool
  -w    download packages without installing them
  -h    show this help
  -P    print the operations supported on each system
  -V    print the version

Examples:
  pacshim -Ss editor         # search for packages
  pacshim -S -f vim          # install vim without confirmation
  pacshim -Suy               # refresh and upgrade the whole system

Unrecognised flags are passed on to the native package manager.
"""


class CLI:
    """pacman-compatible front end for the host's native package manager."""

    def __init__(self, config: Optional[ShimConfig] = None, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out or sys.stdout

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run one invocation and return the process exit code."""
        argv = list(sys.argv[1:] if argv is None else argv)
        try:
            config = self.config or ShimConfig.from_env()
        except PacshimError as e:
            setup_logging()
            logger.error(str(e))
            return e.exit_code

        setup_logging(config.log_level, config.log_file)

        try:
            return self._execute(config, argv)
        except PacshimError as e:
            logger.error(str(e))
            return e.exit_code

    def _execute(self, config: ShimConfig, argv: list[str]) -> int:
        host = detect_host(config)

        if host is HostKind.PACMAN:
            logger.debug(f"Native pacman host, forwarding to {config.pacman_binary}")
            return passthrough(config.pacman_binary, argv)

        context = ParseContext(
            host=host,
            downloadonly_available=config.yum_downloadonly_plugin.exists,
        )
        request = parse_args(argv, context)

        if request.short_circuit:
            return self._print_info(request)

        if host is HostKind.UNKNOWN:
            raise UnsupportedHostError()

        if request.verbose:
            setup_logging("DEBUG", config.log_file)
            # Detection and parsing ran before the level was lowered.
            logger.debug(f"Detected host: {host.value}")
            logger.debug(f"Parsed request: {request}")

        validate(request)

        operation = request.operation
        template = resolve(host, operation)
        if template is None:
            if is_known_unsupported(host, operation):
                logger.warning(str(UnsupportedOperationError(operation, host.value)))
            else:
                logger.debug(f"-{operation} has no mapping on {host.value}, nothing to do")
            return 0

        result = dispatch(render(template, request))
        return result["return_code"]

    def _print_info(self, request: ParsedRequest) -> int:
        if request.help_requested:
            self.out.write(HELP_TEXT)
        elif request.version_requested:
            from . import __version__

            print(f"pacshim {__version__}", file=self.out)
        else:
            self._print_matrix()
        return 0

    def _print_matrix(self) -> None:
        header = ["operation", *(host.value for host in SUPPORTED_HOSTS)]
        print("  ".join(f"{cell:<9}" for cell in header).rstrip(), file=self.out)
        for operation, row in support_matrix().items():
            cells = [f"-{operation}", *(row[host] for host in SUPPORTED_HOSTS)]
            print("  ".join(f"{cell:<9}" for cell in cells).rstrip(), file=self.out)
