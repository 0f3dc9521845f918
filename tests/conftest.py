"""Shared fixtures for mssh tests."""

from pathlib import Path
from typing import Callable, List

import pytest
import yaml
from loguru import logger


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a YAML config under tmp_path and return its path."""

    def _write(name: str = "mssh.yaml", hosts=None, include=None, text=None) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if text is None:
            data = {}
            if include is not None:
                data["include"] = [str(p) for p in include]
            if hosts is not None:
                data["hosts"] = hosts
            text = yaml.safe_dump(data)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def log_messages() -> List[str]:
    """Collect loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by the CLI so they do not outlive CliRunner's streams."""
    yield
    logger.remove()
    logger.add(lambda m: None)
