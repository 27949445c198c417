"""CLI parser and command behaviour tests."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from ideaspec.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "improve", "A shop"])
    assert args.verbose is True
    assert args.command == "improve"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["serve", "-v", "--port", "9000"])
    assert args.verbose is True
    assert args.command == "serve"
    assert args.port == 9000


def test_cli_rejects_unknown_language() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["improve", "A shop", "--lang", "fr"])


def test_improve_prints_prompt(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    main(["improve", "A SaaS landing page with pricing"])

    out = capsys.readouterr().out
    assert out.startswith("Project overview\nBuild a SaaS marketing site")
    assert "Project blueprint" not in out


def test_improve_project_flag_prints_blueprint(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    main(["improve", "A cosy cafe", "--project", "--site-type", "restaurant"])

    out = capsys.readouterr().out
    assert "\n\nProject blueprint\nScope\n" in out
    assert "- Menu (/menu)" in out


def test_improve_json_reads_stdin_and_hints_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    hints_file = tmp_path / "hints.yml"
    hints_file.write_text("siteType: blog\naudience:\n  - Gardeners\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("متجر في مصر"))

    main(["improve", "-", "--hints", str(hints_file), "--lang", "ar", "--json", "--details"])

    data = json.loads(capsys.readouterr().out)
    assert data["details"]["siteType"] == "blog"
    assert data["details"]["outputLang"] == "ar"
    assert data["details"]["audience"][-1] == "Gardeners"
    assert data["improved"].startswith("نظرة عامة على المشروع")


def test_improve_rejects_empty_idea(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["improve", "   "])

    assert excinfo.value.code == 1


def test_improve_reports_unreadable_hints(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["improve", "A shop", "--hints", str(tmp_path / "missing.yml")])

    assert excinfo.value.code == 1


def test_serve_delegates_to_service(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        "ideaspec.service.app.run_service", lambda **kwargs: calls.append(kwargs)
    )

    main(["serve", "--port", "9001"])

    assert calls == [{"host": "0.0.0.0", "port": 9001, "config_path": None, "verbose": False}]
