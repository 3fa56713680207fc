#!/usr/bin/env python3
"""
Runtime configuration for pacshim.

pacshim has no configuration file; the handful of host paths it inspects can
be overridden through ``PACSHIM_*`` environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .exceptions import ConfigError
from .models import HostKind

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# Checked in order when /etc/issue carries no known signature.
DEFAULT_PROBE_PATHS: tuple[tuple[Path, HostKind], ...] = (
    (Path("/usr/bin/apt-get"), HostKind.DPKG),
    (Path("/usr/bin/yum"), HostKind.YUM),
    (Path("/usr/local/bin/brew"), HostKind.HOMEBREW),
    (Path("/usr/bin/emerge"), HostKind.PORTAGE),
)


@dataclass(frozen=True, slots=True)
class ShimConfig:
    """Paths and settings used for one invocation."""

    issue_file: Path = Path("/etc/issue")
    probe_paths: tuple[tuple[Path, HostKind], ...] = field(
        default_factory=lambda: DEFAULT_PROBE_PATHS
    )
    pacman_binary: Path = Path("/usr/bin/pacman")
    yum_downloadonly_plugin: Path = Path("/usr/lib/yum-plugins/downloadonly.py")
    log_level: str = "WARNING"
    log_file: Path | None = None
    host_override: HostKind | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ShimConfig:
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        log_level = env.get("PACSHIM_LOG_LEVEL", defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid PACSHIM_LOG_LEVEL: {log_level!r}", value=log_level)

        host_override = None
        if raw_host := env.get("PACSHIM_HOST"):
            try:
                host_override = HostKind(raw_host.lower())
            except ValueError:
                raise ConfigError(f"Invalid PACSHIM_HOST: {raw_host!r}", value=raw_host) from None
            if host_override is HostKind.UNKNOWN:
                raise ConfigError("PACSHIM_HOST cannot be 'unknown'", value=raw_host)

        log_file = env.get("PACSHIM_LOG_FILE")

        config = cls(
            issue_file=Path(env.get("PACSHIM_ISSUE_FILE", str(defaults.issue_file))),
            pacman_binary=Path(env.get("PACSHIM_PACMAN", str(defaults.pacman_binary))),
            yum_downloadonly_plugin=Path(
                env.get("PACSHIM_YUM_PLUGIN", str(defaults.yum_downloadonly_plugin))
            ),
            log_level=log_level,
            log_file=Path(log_file) if log_file else None,
            host_override=host_override,
        )
        logger.trace(f"Loaded configuration: {config}")
        return config
