"""Tests for cli and formatting modules."""
import pytest

from neontycoon.catalog import default_catalog
from neontycoon.cli import build_parser, main, run_demo
from neontycoon.formatting import format_status_report
from neontycoon.runtime import GameEngine
from neontycoon.skill import SkillId


def test_parser_defaults():
    args = build_parser().parse_args(["simulate"])
    assert args.seconds == 600
    assert args.cps == 5.0
    assert args.tick_resolution == 1.0
    assert not args.prestige


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    assert "neontycoon" in capsys.readouterr().out


def test_demo(capsys):
    main(["demo"])
    out = capsys.readouterr().out
    assert "Money: 0" in out
    assert "Clicked! Money: 1" in out
    assert "Need more money for building." in out


def test_run_demo_returns_engine():
    engine = run_demo()
    assert engine.state.total_clicks == 1
    assert engine.state.building_counts[0] == 0


def test_simulate(capsys):
    main(["simulate", "--seconds", "120", "--cps", "5"])
    out = capsys.readouterr().out
    assert "Strategy: GreedyCheapest (5.0 CPS)" in out
    assert "Simulated: 120.0s" in out
    assert "BUILDINGS:" in out
    assert "Data Miner" in out


def test_status_report():
    engine = GameEngine(default_catalog())
    engine.state.balance = 20
    engine.state.owned_skills.add(SkillId.CHEAPER)
    text = format_status_report(engine)
    assert "Neon Tycoon" in text
    assert "Balance: 20.00" in text
    assert "SKILLS: cheaper" in text
    assert "Reality Engine" in text


def test_status_report_without_skills():
    text = format_status_report(GameEngine(default_catalog()))
    assert "SKILLS: none" in text
