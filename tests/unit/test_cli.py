"""
CLI 单元测试
"""

import json

import pytest
from typer.testing import CliRunner

from fuel_tools import __version__
from fuel_tools.cli.main import app
from fuel_tools.config import DEFAULT_CONFIG_PATH

runner = CliRunner()

GOOD_CONFIG = """---
servers:
  - url: https://api.ignitionfuel.org
  - url: https://myserver
cache:
  path: /tmp/ignition/fuel
"""


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("HOMEPATH", str(home_dir))
    return home_dir


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_show_plain(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(GOOD_CONFIG, encoding="utf-8")

    result = runner.invoke(app, ["show", "-c", str(config_path), "--plain"])
    assert result.exit_code == 0
    assert "Cache location: /tmp/ignition/fuel" in result.output
    assert "URL: https://myserver" in result.output


def test_show_json(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(GOOD_CONFIG, encoding="utf-8")

    result = runner.invoke(app, ["show", "-c", str(config_path), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [server["url"] for server in data["servers"]] == [
        "https://api.ignitionfuel.org",
        "https://myserver",
    ]
    assert data["user_agent"].startswith("IgnitionFuelTools-")


def test_show_pretty_default_config(home):
    result = runner.invoke(app, ["show", "-c", str(DEFAULT_CONFIG_PATH)])
    assert result.exit_code == 0
    assert "https://api.ignitionfuel.org" in result.output
    assert "\x1b[" in result.output


def test_show_invalid_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("cache:\n", encoding="utf-8")

    result = runner.invoke(app, ["show", "-c", str(config_path)])
    assert result.exit_code == 1


def test_validate_ok(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(GOOD_CONFIG, encoding="utf-8")

    result = runner.invoke(app, ["validate", "-c", str(config_path)])
    assert result.exit_code == 0
    assert "验证通过" in result.output


def test_validate_errors_json(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("servers:\n  - url: https://a\n  - url: https://a\n", encoding="utf-8")

    result = runner.invoke(app, ["validate", "-c", str(config_path), "--json"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["error_count"] == 1


def test_init(tmp_path):
    output = tmp_path / "fuel.yaml"

    result = runner.invoke(app, ["init", "-o", str(output)])
    assert result.exit_code == 0
    assert output.read_text(encoding="utf-8") == DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")

    result = runner.invoke(app, ["init", "-o", str(output)])
    assert result.exit_code == 1

    result = runner.invoke(app, ["init", "-o", str(output), "--force"])
    assert result.exit_code == 0
