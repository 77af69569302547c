"""Tests for configuration loading."""

import argparse
import json

import pytest

from wifirtt_live.config import CFG, init_cfg_from_args, load_config_file
from wifirtt_live.utils.path import PROJECT_DIR, to_abs_path


def make_args(**kw):
    base = {"port": None, "interval": None, "scanner": None, "config": None}
    base.update(kw)
    return argparse.Namespace(**base)


class TestCFG:

    def test_defaults(self):
        cfg = CFG()

        assert cfg.scan_interval == 3.0
        assert (cfg.tcp_samples, cfg.icmp_samples) == (5, 10)
        assert cfg.probe_timeout == 2.0
        assert (cfg.scan_timeout, cfg.arp_timeout, cfg.ping_timeout) == (10.0, 5.0, 15.0)
        assert cfg.tcp_port == 80

    def test_apply_coerces_and_ignores_unknown(self):
        cfg = CFG()
        cfg.apply({"tcp_samples": "7", "scan_interval": 1, "bogus": True})

        assert cfg.tcp_samples == 7
        assert cfg.scan_interval == 1.0
        assert not hasattr(cfg, "bogus")


class TestLoadConfigFile:

    def test_yaml(self, tmp_path):
        p = tmp_path / "settings.yaml"
        p.write_text("scan_interval: 5\nicmp_samples: 4\n", encoding="utf-8")

        assert load_config_file(str(p)) == {"scan_interval": 5, "icmp_samples": 4}

    def test_json(self, tmp_path):
        p = tmp_path / "settings.json"
        p.write_text(json.dumps({"tcp_port": 443}), encoding="utf-8")

        assert load_config_file(str(p)) == {"tcp_port": 443}

    def test_missing_file(self, tmp_path):
        assert load_config_file(str(tmp_path / "nope.yaml")) == {}

    def test_none(self):
        assert load_config_file(None) == {}

    def test_non_mapping(self, tmp_path):
        p = tmp_path / "settings.yaml"
        p.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config_file(str(p))


class TestInitCfgFromArgs:

    def test_cli_overrides_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        p = tmp_path / "settings.yaml"
        p.write_text("scan_interval: 5\nport: 4000\n", encoding="utf-8")

        cfg = init_cfg_from_args(make_args(config=str(p), interval=1.5))

        assert cfg.scan_interval == 1.5
        assert cfg.port == 4000

    def test_port_env_default(self, monkeypatch):
        monkeypatch.setenv("PORT", "8088")

        assert init_cfg_from_args(make_args()).port == 8088

    def test_existing_scanner_resolved(self, tmp_path):
        exe = tmp_path / "wifi-scanner"
        exe.write_text("#!/bin/sh\n", encoding="utf-8")

        cfg = init_cfg_from_args(make_args(scanner=str(exe)))

        assert cfg.scanner_path == str(exe.resolve())

    def test_bad_interval(self):
        with pytest.raises(ValueError):
            init_cfg_from_args(make_args(interval=-1.0))


class TestToAbsPath:
    """Lookup order for config and scanner paths."""

    def test_empty(self):
        assert to_abs_path(None) is None
        assert to_abs_path("") is None

    def test_absolute_kept(self, tmp_path):
        target = tmp_path / "scanner"

        assert to_abs_path(str(target)) == target.resolve()

    def test_relative_found_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("port: 1\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert to_abs_path("settings.yaml") == (tmp_path / "settings.yaml").resolve()

    def test_relative_found_in_project_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert to_abs_path("pyproject.toml") == (PROJECT_DIR / "pyproject.toml").resolve()

    def test_missing_relative_falls_back_to_project_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert to_abs_path("nowhere/wifi-scanner") == (PROJECT_DIR / "nowhere/wifi-scanner").resolve()
