"""Tests for pathswitch.cli — CLI entrypoint, ``routes`` and ``match``."""

import sys
import types
from dataclasses import dataclass

import pytest

from pathswitch.cli import main
from pathswitch.routing.switch import Switch


@dataclass(frozen=True, slots=True)
class Profile:
    id: int


@pytest.fixture(autouse=True)
def _fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module holding Switch instances."""
    pages = Switch("Page")
    pages.add("/profile/{id}", Profile)
    pages.unit("/", "home")

    mod = types.ModuleType("_fake_pathswitch_routes")
    mod.switch = pages  # type: ignore[attr-defined]
    mod.empty = Switch("Empty")  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_pathswitch_routes", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["routes", "match"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_switch(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_match_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_pathswitch_routes"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "pathswitch" in capsys.readouterr().out


class TestRoutesCommand:
    def test_lists_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_pathswitch_routes"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["ORDER", "TEMPLATE", "VARIANT"]
        assert lines[2].split() == ["1", "/profile/{id}", "Profile"]
        assert lines[3].split() == ["2", "/", "'home'"]

    def test_empty_switch(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_pathswitch_routes:empty"])
        assert "No routes registered in Empty." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_pathswitch_routes:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestMatchCommand:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_pathswitch_routes", "/profile/007"])
        out = capsys.readouterr().out
        assert "template: /profile/{id}" in out
        assert "value:    Profile(id=7)" in out
        assert "path:     /profile/7" in out

    def test_no_match_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_pathswitch_routes", "/nope"])
        assert exc_info.value.code == 1
        assert "No route in Page matches '/nope'" in capsys.readouterr().err
