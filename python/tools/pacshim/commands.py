#!/usr/bin/env python3
"""
Operation to native command table.

Each entry maps an operation key (primary letter plus secondary code) to one
CommandTemplate per host. Placeholders ``{packages}``, ``{tool_option}``,
``{force}`` and ``{verbose}`` expand to zero or more arguments at render time.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .models import CommandTemplate, HostKind

T = CommandTemplate.of

DPKG = HostKind.DPKG
YUM = HostKind.YUM
BREW = HostKind.HOMEBREW
PORTAGE = HostKind.PORTAGE

COMMAND_TABLE: Dict[str, Dict[HostKind, CommandTemplate]] = {
    "Q": {
        DPKG: T("dpkg -l {packages}"),
        YUM: T("yum list installed {packages}"),
        BREW: T("brew list {packages}"),
        PORTAGE: T("eix -I {packages}"),
    },
    "Qc": {
        DPKG: T("apt-get changelog {packages}"),
        YUM: T("rpm -q --changelog {packages}"),
        PORTAGE: T("equery changes {packages}"),
    },
    "Qi": {
        DPKG: T("dpkg-query -s {packages}"),
        YUM: T("yum info {packages}"),
        BREW: T("brew info {packages}"),
        PORTAGE: T("equery meta {packages}"),
    },
    "Ql": {
        DPKG: T("dpkg-query -L {packages}"),
        YUM: T("rpm -ql {packages}"),
        BREW: T("brew list {packages}"),
        PORTAGE: T("equery files {packages}"),
    },
    "Qm": {
        YUM: T("yum list extras {packages}"),
    },
    "Qo": {
        DPKG: T("dpkg-query -S {packages}"),
        YUM: T("rpm -qf {packages}"),
        PORTAGE: T("equery belongs {packages}"),
    },
    "Qp": {
        DPKG: T("dpkg-deb -c {packages}"),
        YUM: T("rpm -qip {packages}"),
    },
    "Qu": {
        DPKG: T("apt-get upgrade --trivial-only"),
        YUM: T("yum list updates"),
        BREW: T("brew outdated"),
        PORTAGE: T("emerge -uvN world --pretend"),
    },
    "R": {
        DPKG: T("apt-get remove {force} {packages}"),
        YUM: T("yum remove {force} {packages}"),
        BREW: T("brew remove {packages}"),
        PORTAGE: T("emerge --unmerge {force} {verbose} {packages}"),
    },
    "Rs": {
        DPKG: T("apt-get autoremove {force} {packages}"),
        YUM: T("yum autoremove {force} {packages}"),
        PORTAGE: T("emerge --depclean {force} {verbose} {packages}"),
    },
    "S": {
        DPKG: T("apt-get install {tool_option} {force} {packages}"),
        YUM: T("yum install {tool_option} {force} {verbose} {packages}"),
        BREW: T("brew install {verbose} {packages}"),
        PORTAGE: T("emerge {tool_option} {force} {verbose} {packages}"),
    },
    "Sc": {
        DPKG: T("apt-get clean"),
        YUM: T("yum clean expire-cache"),
        BREW: T("brew cleanup"),
        PORTAGE: T("eclean -i distfiles"),
    },
    "Scc": {
        DPKG: T("apt-get autoclean"),
        YUM: T("yum clean packages"),
        BREW: T("brew cleanup -s"),
        PORTAGE: T("eclean distfiles"),
    },
    "Sccc": {
        DPKG: T(
            "rm -fv /var/cache/apt/*.bin /var/cache/apt/archives/*.* /var/lib/apt/lists/*.*",
            "apt-get autoclean",
        ),
        YUM: T("yum clean all"),
        PORTAGE: T("rm -fv /usr/portage/distfiles/*.*"),
    },
    "Ss": {
        DPKG: T("apt-cache search {packages}"),
        YUM: T("yum search {packages}"),
        BREW: T("brew search {packages}"),
        PORTAGE: T("emerge --search {packages}"),
    },
    "Su": {
        DPKG: T("apt-get upgrade {tool_option} {force}"),
        YUM: T("yum update {tool_option} {force}"),
        BREW: T("brew upgrade"),
        PORTAGE: T("emerge -uND {tool_option} {force} {verbose} world"),
    },
    "Sy": {
        DPKG: T("apt-get update"),
        YUM: T("yum makecache"),
        BREW: T("brew update"),
        PORTAGE: T("emerge --sync"),
    },
    "Suy": {
        DPKG: T("apt-get update", "apt-get upgrade {tool_option} {force}"),
        YUM: T("yum update {tool_option} {force}"),
        BREW: T("brew update", "brew upgrade"),
        PORTAGE: T("emerge --sync", "emerge -uND {tool_option} {force} {verbose} world"),
    },
    "U": {
        YUM: T("yum localinstall --nogpgcheck {force} {packages}"),
    },
}

# Valid operations that a host cannot perform; these get a diagnostic instead
# of being silently ignored.
KNOWN_UNSUPPORTED: frozenset[Tuple[HostKind, str]] = frozenset({
    (DPKG, "Qm"),
    (DPKG, "U"),
    (BREW, "Qc"),
    (BREW, "Qm"),
    (BREW, "Qo"),
    (BREW, "Qp"),
    (BREW, "U"),
    (PORTAGE, "Qm"),
    (PORTAGE, "Qp"),
    (PORTAGE, "U"),
})

SUPPORTED_HOSTS: Tuple[HostKind, ...] = (DPKG, YUM, BREW, PORTAGE)


def resolve(host: HostKind, operation: str) -> Optional[CommandTemplate]:
    """Return the template for ``operation`` on ``host``, or None if there is none."""
    return COMMAND_TABLE.get(operation, {}).get(host)


def is_known_unsupported(host: HostKind, operation: str) -> bool:
    return (host, operation) in KNOWN_UNSUPPORTED


def support_matrix() -> Dict[str, Dict[HostKind, str]]:
    """
    Describe every operation on every supported host.

    Values are ``"yes"`` for implemented operations, ``"no"`` for known
    unsupported ones and ``"-"`` for unmapped ones.
    """
    matrix: Dict[str, Dict[HostKind, str]] = {}
    for operation in COMMAND_TABLE:
        row = {}
        for host in SUPPORTED_HOSTS:
            if resolve(host, operation) is not None:
                row[host] = "yes"
            elif is_known_unsupported(host, operation):
                row[host] = "no"
            else:
                row[host] = "-"
        matrix[operation] = row
    return matrix
