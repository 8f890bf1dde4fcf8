"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def write_yaml() -> Callable[[Path, dict[str, Any]], Path]:
    """Write a YAML document, creating parent directories."""

    def _write(path: Path, data: dict[str, Any]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        return path

    return _write


@pytest.fixture
def data_root(temp_dir: Path, write_yaml) -> Path:
    """
    A data root with one melodic and one percussion instrument and a
    two-track style called 'basic'.
    """
    root = temp_dir / "data"
    write_yaml(
        root / "instruments" / "piano.yaml",
        {"instrument": {"type": "piano", "program": 1}},
    )
    write_yaml(
        root / "instruments" / "drums.yaml",
        {"instrument": {"type": "drums", "pitchMap": {"x": 36}}},
    )
    write_yaml(
        root / "styles" / "basic" / "1-piano.yaml",
        {"track": {"instrument": "piano", "notes": [{"pitch": "c4", "duration": 4}]}},
    )
    write_yaml(
        root / "styles" / "basic" / "2-drums.yaml",
        {"track": {"instrument": "drums", "notes": [{"pitches": ["x"], "duration": 8}]}},
    )
    return root
