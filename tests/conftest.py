"""Shared pytest fixtures for fragstrings tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fragstrings.domain.cache import clear_cache
from fragstrings.services.codec import CodecService


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep user env vars and the process-wide schema cache out of tests."""
    for name in (
        "FRAGSTRINGS_CONFIG",
        "FRAGSTRINGS_JSON_OUTPUT",
        "FRAGSTRINGS_QUIET",
        "FRAGSTRINGS_VERBOSE",
        "FRAGSTRINGS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def codec() -> CodecService:
    """CodecService with a couple of aliases, one of them broken."""
    return CodecService(aliases={"user": "%s%d?", "event": "%s%d*", "broken": "%s?"})


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary CWD holding a fragstrings.toml with descriptor aliases."""
    (tmp_path / "fragstrings.toml").write_text(
        '[descriptors]\nuser = "%s%d?"\nevent = "%s%d*"\n',
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def _empty_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no config file is discovered."""
    monkeypatch.chdir(tmp_path)
