"""Tests for the command-line entry point."""

import pytest

from gridchess.app import build_parser, main


def test_parser_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRIDCHESS_LOG_LEVEL", raising=False)
    args = build_parser().parse_args([])
    assert args.log_level == "WARNING"
    assert args.theme == "Classic"
    assert not args.no_animation


def test_log_level_is_case_insensitive() -> None:
    args = build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDCHESS_LOG_LEVEL", "info")
    args = build_parser().parse_args([])
    assert args.log_level == "INFO"


def test_unknown_theme_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*_args: object, **_kwargs: object) -> int:
        raise AssertionError("application must not start")

    monkeypatch.setattr("gridchess.ui.bootstrap.run_application", _fail)
    with pytest.raises(SystemExit) as exc:
        main(["--theme", "Neon"])
    assert "Unknown board theme 'Neon'" in str(exc.value.code)


def test_main_runs_application(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def _run(argv: list[str], settings: object) -> int:
        captured["settings"] = settings
        return 0

    monkeypatch.setattr("gridchess.ui.bootstrap.run_application", _run)
    with pytest.raises(SystemExit) as exc:
        main(["--no-animation", "--theme", "Blue"])
    assert exc.value.code == 0
    assert captured["settings"].board_theme == "Blue"
    assert not captured["settings"].animate_moves


def test_invalid_log_level_from_environment_exits(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _fail(*_args: object, **_kwargs: object) -> int:
        raise AssertionError("application must not start")

    monkeypatch.setenv("GRIDCHESS_LOG_LEVEL", "trace")
    monkeypatch.setattr("gridchess.ui.bootstrap.run_application", _fail)
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "$GRIDCHESS_LOG_LEVEL must be one of" in err
    assert "'TRACE'" in err
