"""
Integration test: Files on disk through to request checks.

Tests:
- .seb file -> Config Key -> request hash validation
- Settings file drives generation
- Command-line script output and exit codes
"""

import importlib.util
import logging
import pytest
from pathlib import Path

from configkey import generate, generate_from_file, PropertyList
from configkey.config.hashing import settings_fingerprint
from configkey.config.load import load_config, save_config
from configkey.config.schema import ConfigKeySettings, GeneratorConfig
from configkey.keygen.access import AccessValidator, request_hash

PROJECT_ROOT = Path(__file__).parents[2]
URL = "https://lms.example.com/mod/quiz/attempt.php?attempt=12"


@pytest.fixture
def cli():
    """Load scripts/config_key.py as a module."""
    spec = importlib.util.spec_from_file_location("config_key_cli", PROJECT_ROOT / "scripts" / "config_key.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module

    package_logger = logging.getLogger("configkey")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def seb_file(tmp_path, simple_xml):
    path = tmp_path / "exam.seb"
    path.write_text(simple_xml, encoding="utf-8")
    return path


class TestFileToAccess:
    
    def test_client_request_accepted(self, seb_file):
        server_key = generate_from_file(seb_file)
        
        # The client computes the same key from its own copy of the settings
        client_key = generate(seb_file.read_bytes())
        headers = {"X-SafeExamBrowser-ConfigKeyHash": request_hash(URL, client_key.hash)}
        
        assert AccessValidator().validate(headers, URL, server_key)
    
    def test_edited_template_rejected(self, seb_file):
        server_key = generate_from_file(seb_file)
        
        plist = PropertyList(seb_file.read_bytes())
        plist.set("allowQuit", True)
        headers = {"X-SafeExamBrowser-ConfigKeyHash": request_hash(URL, plist.config_key().hash)}
        
        assert not AccessValidator().validate(headers, URL, server_key)
    
    def test_settings_file_drives_generation(self, tmp_path, seb_file):
        settings = ConfigKeySettings(generator=GeneratorConfig(excluded_keys=("originatorVersion", "proxies")))
        save_config(settings, tmp_path / "settings.yaml")
        loaded = load_config(tmp_path / "settings.yaml")
        
        key = generate_from_file(seb_file, loaded.generator)
        assert b"proxies" not in key.canonical_form
        assert key != generate_from_file(seb_file)


class TestCommandLine:
    
    def test_prints_hash(self, cli, seb_file, capsys):
        assert cli.main([str(seb_file)]) == 0
        out = capsys.readouterr().out
        assert out.strip() == f"{generate_from_file(seb_file).hash}  {seb_file}"
    
    def test_canonical_and_url(self, cli, seb_file, simple_canonical, capsys):
        assert cli.main([str(seb_file), "--canonical", "--url", URL]) == 0
        lines = capsys.readouterr().out.splitlines()
        key = generate_from_file(seb_file)
        
        assert lines[1] == simple_canonical
        assert lines[2] == f"{request_hash(URL, key.hash)}  {URL}"
    
    def test_malformed_file_exit_code(self, cli, tmp_path, seb_file, capsys):
        bad = tmp_path / "bad.seb"
        bad.write_text("<?xml This is some bad xml for sure.")
        
        assert cli.main([str(bad), str(seb_file)]) == 1
        out = capsys.readouterr().out
        assert str(seb_file) in out
        assert str(bad) not in out
    
    def test_missing_settings_file(self, cli, seb_file, capsys):
        assert cli.main([str(seb_file), "--config", "/nonexistent/settings.yaml"]) == 2
        assert "not found" in capsys.readouterr().err
    
    def test_verbose_logs_settings_fingerprint(self, cli, seb_file, capsys):
        assert cli.main([str(seb_file), "--verbose"]) == 0
        err = capsys.readouterr().err
        assert f"Settings fingerprint {settings_fingerprint(ConfigKeySettings())}" in err
    
    def test_quiet_by_default(self, cli, seb_file, capsys):
        assert cli.main([str(seb_file)]) == 0
        assert "Settings fingerprint" not in capsys.readouterr().err
    
    def test_settings_file(self, cli, tmp_path, seb_file, capsys):
        settings = ConfigKeySettings(generator=GeneratorConfig(excluded_keys=()))
        save_config(settings, tmp_path / "settings.yaml")
        
        assert cli.main([str(seb_file), "--config", str(tmp_path / "settings.yaml"), "--canonical"]) == 0
        assert "originatorVersion" in capsys.readouterr().out
