"""Smoke tests for the demo entry points."""

from gfpoly import main as demo_main
from gfpoly.sampling import demo as sampling_demo


def test_quick_demo_runs(capsys) -> None:
    demo_main.main(["--quick"])
    out = capsys.readouterr().out
    assert "QUICK DEMO COMPLETE" in out
    assert "(α+1)·x^2 + 1" in out
    assert "no inverse" in out


def test_division_demo_reports_identity(capsys) -> None:
    demo_main.run_division()
    out = capsys.readouterr().out
    assert "q × d + r == p: True" in out
    assert "p ÷ 0 -> None" in out


def test_sampling_demo_ring_laws(capsys) -> None:
    sampling_demo.demo_ring_laws(samples=50)
    out = capsys.readouterr().out
    assert "Division identity held:  50/50" in out
    assert "Inversion round-trips:   50/50" in out


def test_interactive_menu_quits(monkeypatch, capsys) -> None:
    answers = iter(["1", "", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    demo_main.main([])
    assert "Goodbye!" in capsys.readouterr().out
