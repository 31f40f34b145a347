from __future__ import annotations

import pytest

from versioned_greeter.common.config import Settings


def test_defaults(monkeypatch) -> None:
    for key in ("API_PORT", "GREET_STRICT_VERSIONS", "API_PORT_FILE", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.api_port == 8080
    assert s.greet_strict_versions is False
    assert s.log_format == "json"


def test_env_aliases(monkeypatch) -> None:
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("GREET_STRICT_VERSIONS", "true")
    s = Settings(_env_file=None)
    assert s.api_port == 9090
    assert s.greet_strict_versions is True


def test_file_override_is_typed(monkeypatch, tmp_path) -> None:
    port_file = tmp_path / "port"
    port_file.write_text("9191\n", encoding="utf-8")
    monkeypatch.setenv("API_PORT_FILE", str(port_file))

    s = Settings(_env_file=None)
    assert s.api_port == 9191


def test_file_override_read_failure(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LOG_LEVEL_FILE", str(tmp_path / "missing"))
    with pytest.raises(RuntimeError):
        Settings(_env_file=None)


def test_unrelated_file_vars_are_ignored(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SOMETHING_ELSE_FILE", str(tmp_path / "missing"))
    s = Settings(_env_file=None)
    assert s.service_name
