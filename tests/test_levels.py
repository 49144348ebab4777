"""
Tests for the level registry and the command-line replay.

Core claims:
    - Every registered level's scripted solution solves it
    - Solutions fail cleanly when played with too few unlocks
    - The CLI replays a level and reports QED
"""

import sys

import pytest

from wireproof.__main__ import main
from wireproof.core.case import Node
from wireproof.levels import LEVELS, solve
from wireproof.session import LevelSession
from wireproof.unlocks import Unlocks


class TestRegistry:
    @pytest.mark.parametrize("name", list(LEVELS))
    def test_solution_solves_level(self, name):
        level = LEVELS[name]
        session = LevelSession(level["spec"], unlocks=level["unlocks"])
        assert not session.complete()
        assert solve(session, level["solution"])
        assert session.tree.open_cases() == []

    @pytest.mark.parametrize("name", list(LEVELS))
    def test_level_has_description(self, name):
        assert LEVELS[name]["description"]

    def test_lemma_level_needs_lemmas(self, capsys):
        level = LEVELS["lemma"]
        session = LevelSession(level["spec"], unlocks=Unlocks.CASES, verbose=True)
        assert not solve(session, level["solution"])
        assert "[rejected] wire 1" in capsys.readouterr().out

    def test_or_elim_visits_both_cases(self):
        level = LEVELS["or_elim"]
        session = LevelSession(level["spec"], unlocks=level["unlocks"])
        solve(session, level["solution"])
        assert [entry["label"] for entry in session.tree.history] == ["∨ 3", "⇒ 4", "⇒ 5"]

    def test_unknown_click_kind(self):
        session = LevelSession(LEVELS["and_intro"]["spec"])
        with pytest.raises(ValueError, match="unknown click kind"):
            solve(session, [("edge", 0)])

    def test_wrong_click_is_rejected(self):
        session = LevelSession(LEVELS["and_intro"]["spec"])
        assert not solve(session, [("node", 0)])
        assert session.click_node(Node(2))


class TestCli:
    def run(self, monkeypatch, *args):
        monkeypatch.setattr(sys, "argv", ["wireproof", *args])
        main()

    def test_list(self, monkeypatch, capsys):
        self.run(monkeypatch, "--list")
        out = capsys.readouterr().out
        for name in LEVELS:
            assert name in out

    @pytest.mark.parametrize("name", ["and_intro", "or_elim", "lemma"])
    def test_replay_reports_qed(self, monkeypatch, capsys, name):
        self.run(monkeypatch, "--level", name, "--quiet")
        out = capsys.readouterr().out
        assert f"Level: {name}" in out
        assert "QED" in out

    def test_unlock_override(self, monkeypatch, capsys):
        self.run(monkeypatch, "--level", "lemma", "--unlocks", "none", "--quiet")
        out = capsys.readouterr().out
        assert "Not solved" in out
        assert "Open cases: [0]" in out

    def test_dot_export(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "level.dot"
        self.run(monkeypatch, "--level", "and_intro", "--quiet", "--dot", str(path))
        assert path.read_text(encoding="utf-8").startswith("digraph case {")
