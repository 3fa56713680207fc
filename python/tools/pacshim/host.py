#!/usr/bin/env python3
"""
Host package manager detection.

The distribution banner in /etc/issue is checked first; when it carries no
known signature, well-known executable paths are probed instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from .config import ShimConfig
from .models import HostKind

# Priority order matters: the first matching signature wins.
ISSUE_SIGNATURES: tuple[tuple[str, HostKind], ...] = (
    ("arch linux", HostKind.PACMAN),
    ("debian", HostKind.DPKG),
    ("ubuntu", HostKind.DPKG),
    ("centos", HostKind.YUM),
    ("fedora", HostKind.YUM),
)


def _read_issue(issue_file: Path) -> str:
    try:
        return issue_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {issue_file}: {e}")
        return ""


def match_issue(text: str) -> HostKind:
    """Return the host kind whose signature appears in ``text``, else UNKNOWN."""
    lowered = text.lower()
    for signature, kind in ISSUE_SIGNATURES:
        if signature in lowered:
            return kind
    return HostKind.UNKNOWN


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def detect_host(config: ShimConfig) -> HostKind:
    """
    Determine the native package manager family of this host.

    Args:
        config: Configuration carrying the issue file and probe paths

    Returns:
        The detected HostKind, UNKNOWN if nothing matched
    """
    if config.host_override is not None:
        logger.debug(f"Host forced to {config.host_override.value} by PACSHIM_HOST")
        return config.host_override

    kind = match_issue(_read_issue(config.issue_file))
    if kind is not HostKind.UNKNOWN:
        logger.debug(f"Detected {kind.value} from {config.issue_file}")
        return kind

    for path, candidate in config.probe_paths:
        if is_executable(path):
            logger.debug(f"Detected {candidate.value} from {path}")
            return candidate

    logger.debug("No package manager detected")
    return HostKind.UNKNOWN
