"""Tests for environment configuration."""

import logging

import pytest

from sysnap.config import SnapshotConfig, load_config
from sysnap.errors import ConfigError


class TestLoadConfig:
    def test_defaults(self):
        config = load_config({})
        assert config.include_disks is True
        assert config.include_networks is True
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_toggles(self):
        config = load_config(
            {"SYSNAP_INCLUDE_DISKS": "0", "SYSNAP_INCLUDE_NETWORKS": "false"}
        )
        assert config.include_disks is False
        assert config.include_networks is False

    def test_log_level_case_insensitive(self):
        config = load_config({"SYSNAP_LOG_LEVEL": "debug"})
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    def test_unrelated_variables_ignored(self):
        config = load_config({"SYSNAP_OUTPUT": "/tmp/elsewhere.json", "HOME": "/root"})
        assert config == SnapshotConfig()

    def test_invalid_bool(self):
        with pytest.raises(ConfigError, match="SYSNAP_"):
            load_config({"SYSNAP_INCLUDE_DISKS": "maybe"})

    def test_invalid_level(self):
        with pytest.raises(ConfigError):
            load_config({"SYSNAP_LOG_LEVEL": "LOUD"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SYSNAP_INCLUDE_NETWORKS", "no")
        assert load_config().include_networks is False
