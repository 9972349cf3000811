"""
Payload loading utilities.

This module provides:
- load_payload(): Read and decode a single payload file
- load_payloads_batch(): Decode every payload in a directory with error collection
"""

from __future__ import annotations

import logging
from pathlib import Path

from monitoring_api.exceptions import DecodeError
from monitoring_api.schemas.base import ApiModel, OneOf, UnparsedObject
from monitoring_api.schemas.registry import get_model

logger = logging.getLogger(__name__)

# Fixture directories document their payloads in this file
MANIFEST_NAME = 'manifest.json'


def load_payload(filepath: Path, model: str | type[ApiModel] | OneOf) -> ApiModel | UnparsedObject:
    """
    Load and decode a payload file.

    Args:
        filepath: Path to a JSON payload file
        model: Model class, OneOf union, or registered schema name

    Returns:
        Typed record, or UnparsedObject if the payload does not fit the model

    Raises:
        FileNotFoundError: If file doesn't exist
        DecodeError: If the payload is malformed or misses a required field
        UnknownModelError: If model is a name that is not registered
    """
    if isinstance(model, str):
        model = get_model(model)  # Unknown names fail before the file is read
    payload = filepath.read_bytes()

    if isinstance(model, OneOf):
        return model.decode(payload)
    return model.from_json(payload)


def load_payloads_batch(
    directory: Path,
    model: str | type[ApiModel] | OneOf,
    pattern: str = '*.json',
) -> tuple[list[ApiModel | UnparsedObject], dict[Path, Exception]]:
    """
    Load and decode multiple payloads.

    Args:
        directory: Directory containing payload files
        model: Model class, OneOf union, or registered schema name
        pattern: Glob pattern for filenames (manifest.json is always skipped)

    Returns:
        Tuple of (decoded records, errors dict with file -> error mapping)
    """
    records: list[ApiModel | UnparsedObject] = []
    errors: dict[Path, Exception] = {}

    for filepath in sorted(directory.glob(pattern)):
        if filepath.name == MANIFEST_NAME:
            continue
        try:
            records.append(load_payload(filepath, model))
        except (DecodeError, OSError) as e:
            logger.debug(f'{filepath.name}: {e}')
            errors[filepath] = e

    return records, errors
