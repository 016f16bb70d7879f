"""Shared pytest fixtures for treelayout tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from treelayout.domain.layout import Layout
from treelayout.infrastructure.snapshot import write_snapshot


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from a temp CWD with no TREELAYOUT_* variables set."""
    for key in list(os.environ):
        if key.startswith("TREELAYOUT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_layout() -> Layout:
    """Three vertices: a root at offset 5 and two children below it."""
    layout = Layout(3, 0.0, 10.0, 0.0, 2.0)
    layout[0].depth, layout[0].offset = 0.0, 5.0
    layout[1].depth, layout[1].offset = 1.0, 2.0
    layout[2].depth, layout[2].offset = 1.0, 8.0
    return layout


@pytest.fixture
def snapshot_path(tmp_path: Path, sample_layout: Layout) -> Path:
    """The sample layout written to ``layout.json``."""
    path = tmp_path / "layout.json"
    write_snapshot(sample_layout, path)
    return path


@pytest.fixture
def bad_snapshot_path(tmp_path: Path) -> Path:
    """A layout whose vertex 1 lies left of the stored box."""
    layout = Layout(2, 0.0, 4.0, 0.0, 1.0)
    layout[0].depth, layout[0].offset = 0.0, 2.0
    layout[1].depth, layout[1].offset = 1.0, -3.0
    path = tmp_path / "bad.json"
    write_snapshot(layout, path)
    return path
