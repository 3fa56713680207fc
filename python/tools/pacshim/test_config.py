import pytest
from pathlib import Path

from pacshim.config import DEFAULT_PROBE_PATHS, ShimConfig
from pacshim.exceptions import ConfigError
from pacshim.models import HostKind


class TestShimConfig:
    """Tests for environment driven configuration."""

    def test_defaults(self):
        config = ShimConfig.from_env({})
        assert config.issue_file == Path("/etc/issue")
        assert config.pacman_binary == Path("/usr/bin/pacman")
        assert config.yum_downloadonly_plugin == Path("/usr/lib/yum-plugins/downloadonly.py")
        assert config.probe_paths == DEFAULT_PROBE_PATHS
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.host_override is None

    def test_probe_order(self):
        assert [kind for _, kind in DEFAULT_PROBE_PATHS] == [
            HostKind.DPKG,
            HostKind.YUM,
            HostKind.HOMEBREW,
            HostKind.PORTAGE,
        ]

    def test_overrides(self, tmp_path):
        config = ShimConfig.from_env({
            "PACSHIM_ISSUE_FILE": str(tmp_path / "issue"),
            "PACSHIM_PACMAN": "/opt/bin/pacman",
            "PACSHIM_YUM_PLUGIN": str(tmp_path / "plugin.py"),
            "PACSHIM_LOG_LEVEL": "debug",
            "PACSHIM_LOG_FILE": str(tmp_path / "pacshim.log"),
            "PACSHIM_HOST": "Portage",
        })
        assert config.issue_file == tmp_path / "issue"
        assert config.pacman_binary == Path("/opt/bin/pacman")
        assert config.yum_downloadonly_plugin == tmp_path / "plugin.py"
        assert config.log_level == "DEBUG"
        assert config.log_file == tmp_path / "pacshim.log"
        assert config.host_override is HostKind.PORTAGE

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError, match="Invalid PACSHIM_LOG_LEVEL"):
            ShimConfig.from_env({"PACSHIM_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("value", ["apk", "unknown"])
    def test_invalid_host(self, value):
        with pytest.raises(ConfigError):
            ShimConfig.from_env({"PACSHIM_HOST": value})

    def test_frozen(self):
        config = ShimConfig()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"
