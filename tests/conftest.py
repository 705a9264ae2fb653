"""Shared pytest fixtures and test helpers for shapecheck tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from shapecheck.domain.notation import DecodeCache
from shapecheck.domain.validator import Validator
from shapecheck.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep SHAPECHECK_* env vars, telemetry, and log handlers per-test."""
    for name in [n for n in os.environ if n.startswith("SHAPECHECK_")]:
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    disable_telemetry()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cache() -> DecodeCache:
    """A fresh, unbounded decode cache."""
    return DecodeCache()


@pytest.fixture
def validator(cache: DecodeCache) -> Validator:
    """A validator that shares nothing with other tests."""
    return Validator(cache=cache)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper that writes a JSON (or raw text) document under tmp_path."""

    def _write(name: str, document: Any) -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
