import pytest

from pacshim.commands import (
    COMMAND_TABLE,
    KNOWN_UNSUPPORTED,
    SUPPORTED_HOSTS,
    is_known_unsupported,
    resolve,
    support_matrix,
)
from pacshim.dispatcher import render
from pacshim.models import CommandTemplate, HostKind
from pacshim.parser import ParseContext, parse_args

PLACEHOLDERS = {"{packages}", "{tool_option}", "{force}", "{verbose}"}


def rendered(argv, host):
    request = parse_args(argv, ParseContext(host=host))
    return render(resolve(host, request.operation), request)


class TestCommandTable:
    def test_every_entry_is_well_formed(self):
        for operation, hosts in COMMAND_TABLE.items():
            assert operation[0] in "QSRU"
            for host, template in hosts.items():
                assert host in SUPPORTED_HOSTS
                assert isinstance(template, CommandTemplate)
                assert template.steps
                for step in template.steps:
                    assert step[0] not in PLACEHOLDERS, f"{operation} on {host} starts with a placeholder"

    def test_known_unsupported_has_no_template(self):
        for host, operation in KNOWN_UNSUPPORTED:
            assert resolve(host, operation) is None

    @pytest.mark.parametrize(
        "host, operation",
        [(HostKind.HOMEBREW, "Qo"), (HostKind.PORTAGE, "Qp"), (HostKind.DPKG, "U"), (HostKind.HOMEBREW, "U")],
    )
    def test_documented_unsupported(self, host, operation):
        assert is_known_unsupported(host, operation)

    def test_pacman_and_unknown_have_no_templates(self):
        for operation in COMMAND_TABLE:
            assert resolve(HostKind.PACMAN, operation) is None
            assert resolve(HostKind.UNKNOWN, operation) is None

    def test_unmapped_operation(self):
        assert resolve(HostKind.DPKG, "Qz") is None
        assert not is_known_unsupported(HostKind.DPKG, "Qz")

    def test_support_matrix(self):
        matrix = support_matrix()
        assert set(matrix) == set(COMMAND_TABLE)
        assert matrix["Ss"][HostKind.DPKG] == "yes"
        assert matrix["Qo"][HostKind.HOMEBREW] == "no"
        assert matrix["Rs"][HostKind.HOMEBREW] == "-"


class TestRenderedCommands:
    def test_dpkg_search(self):
        assert rendered(["-Ss", "foo"], HostKind.DPKG) == [["apt-cache", "search", "foo"]]

    def test_yum_forced_install(self):
        assert rendered(["-S", "-f", "pkgA"], HostKind.YUM) == [["yum", "install", "-y", "pkgA"]]

    def test_dpkg_forced_install(self):
        assert rendered(["-Sf", "pkgA", "pkgB"], HostKind.DPKG) == [
            ["apt-get", "install", "--force-yes", "-y", "pkgA", "pkgB"]
        ]

    def test_dpkg_download_only(self):
        assert rendered(["-Sw", "vim"], HostKind.DPKG) == [["apt-get", "install", "-d", "vim"]]

    def test_dpkg_full_upgrade_is_two_steps(self):
        assert rendered(["-Suy"], HostKind.DPKG) == [
            ["apt-get", "update"],
            ["apt-get", "upgrade"],
        ]

    def test_portage_default_asks(self):
        assert rendered(["-S", "vim"], HostKind.PORTAGE) == [["emerge", "--ask", "vim"]]

    def test_portage_force_drops_ask(self):
        assert rendered(["-Sfv", "vim"], HostKind.PORTAGE) == [["emerge", "-v", "vim"]]

    def test_homebrew_remove(self):
        assert rendered(["-R", "wget"], HostKind.HOMEBREW) == [["brew", "remove", "wget"]]

    def test_extra_flags_trail_the_last_step(self):
        assert rendered(["-Suy", "--quiet"], HostKind.DPKG) == [
            ["apt-get", "update"],
            ["apt-get", "upgrade", "--quiet"],
        ]
