"""
Descriptor files - YAML documents with a single top-level key.

Instrument files look like ``instrument: {type: ..., program: ...}`` and
track files like ``track: {instrument: ..., notes: [...]}``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from style_builder.constants import DESCRIPTOR_SUFFIXES
from style_builder.errors import MalformedDescriptorError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def list_descriptor_files(directory: Path) -> list[Path]:
    """
    List the descriptor files in a directory, sorted by file name.

    The order matters: tracks are compiled, and channels allocated, in
    this order.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Descriptor directory not found: {directory}")

    return sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() in DESCRIPTOR_SUFFIXES
        ),
        key=lambda p: p.name,
    )


def read_descriptor(path: Path, key: str, model: type[ModelT]) -> ModelT:
    """
    Load one descriptor file.

    Args:
        path: YAML file
        key: Top-level key holding the descriptor ('instrument' or 'track')
        model: Pydantic model to validate the descriptor against

    Raises:
        MalformedDescriptorError: on YAML errors or a wrong shape
    """
    logger.debug("Reading %s descriptor %s", key, path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise MalformedDescriptorError(path, str(e)) from e

    if not isinstance(data, dict) or key not in data:
        raise MalformedDescriptorError(path, f"expected a top-level '{key}' mapping")

    try:
        return model.model_validate(data[key])
    except ValidationError as e:
        raise MalformedDescriptorError(path, str(e)) from e
