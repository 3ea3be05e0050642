"""Shared pytest fixtures for graphpoet tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from graphpoet.config.settings import PoetSettings
from graphpoet.infrastructure.engine import PoetEngine
from graphpoet.services.telemetry import disable_telemetry

MUGAR_CORPUS = "This is a test of the Mugar Omni Theater sound system.\n"

ENTERPRISE_CORPUS = "To explore strange new worlds\nTo seek out new life and new civilizations\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep developer env vars from leaking into settings."""
    for var in ("GRAPHPOET_CONFIG", "GRAPHPOET_CORPUS_PATH", "GRAPHPOET_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def mugar_corpus(tmp_path: Path) -> Path:
    path = tmp_path / "mugar.txt"
    path.write_text(MUGAR_CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def enterprise_corpus(tmp_path: Path) -> Path:
    path = tmp_path / "enterprise.txt"
    path.write_text(ENTERPRISE_CORPUS, encoding="utf-8")
    return path


type EngineFactory = Callable[..., PoetEngine]


@pytest.fixture
def make_engine(tmp_path: Path) -> EngineFactory:
    """Build a PoetEngine rooted at tmp_path with an optional corpus and flags."""

    def _make(corpus: Path | None = None, **flags: Any) -> PoetEngine:
        settings = PoetSettings.from_cli(project_root=tmp_path, corpus_path=corpus, **flags)
        return PoetEngine(settings)

    return _make


@pytest.fixture
def mugar_engine(make_engine: EngineFactory, mugar_corpus: Path) -> PoetEngine:
    return make_engine(mugar_corpus)


@pytest.fixture
def enterprise_engine(make_engine: EngineFactory, enterprise_corpus: Path) -> PoetEngine:
    return make_engine(enterprise_corpus)
