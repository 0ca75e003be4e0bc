from __future__ import annotations

from pathlib import Path

import pytest
import typer

from dataresult.cli.context import CONFIG_ENV, build_context, config_path
from dataresult.core.errors import ErrorCode


def test_config_path_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    path, explicit = config_path()

    assert path == tmp_path / "dataresult.toml"
    assert explicit is False


def test_config_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "custom.toml"))

    path, explicit = config_path()

    assert path == tmp_path / "custom.toml"
    assert explicit is True


def test_missing_default_config_is_fine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    ctx = build_context()

    assert ctx.config.output.color is True
    assert dict(ctx.config.network.messages) == {}


def test_missing_explicit_config_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing.toml"))

    with pytest.raises(typer.Exit) as exc:
        build_context()

    assert exc.value.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_invalid_default_config_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "dataresult.toml").write_text("[output\n", encoding="utf-8")

    with pytest.raises(typer.Exit) as exc:
        build_context()

    assert exc.value.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_loads_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "dataresult.toml"
    path.write_text("[output]\ncolor = false\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    ctx = build_context()

    assert ctx.config.output.color is False
    assert ctx.config_path == path


def test_config_error_path_not_repeated(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("x = [\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    with pytest.raises(typer.Exit):
        build_context()

    err = capsys.readouterr().err
    assert err.count(str(path)) == 1


def test_file_error_includes_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "missing.toml"
    monkeypatch.setenv(CONFIG_ENV, str(path))

    with pytest.raises(typer.Exit):
        build_context()

    assert f"File not found! ({path})" in capsys.readouterr().err
