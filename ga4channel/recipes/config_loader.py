"""Utilities for loading ga4channel settings from JSON or a mapping."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .. import constants, errors

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"dataset", "timeout", "max_retries", "extra_sources", "medium_overrides"}


@dataclass
class Config:
    dataset: Optional[str] = None
    timeout: Optional[float] = constants.DEFAULT_TIMEOUT
    max_retries: int = constants.DEFAULT_MAX_RETRIES
    extra_sources: dict[str, str] = field(default_factory=dict)
    medium_overrides: dict[str, list[str]] = field(default_factory=dict)


def _read_source(source) -> dict:
    if source is None:
        return {}
    if isinstance(source, Mapping):
        return dict(source)
    try:
        with open(source, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise errors.BadConfig(f"Failed to read config {source!r}: {exc}") from exc
    if not isinstance(data, dict):
        raise errors.BadConfig(f"Config {source!r} must be a JSON object")
    return data


def _to_timeout(value) -> Optional[float]:
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise errors.BadConfig(f"timeout must be a number: {value!r}") from exc
    return timeout if timeout > 0 else None


def _to_max_retries(value) -> int:
    try:
        max_retries = int(value)
    except (TypeError, ValueError) as exc:
        raise errors.BadConfig(f"max_retries must be an int: {value!r}") from exc
    if max_retries < 1:
        raise errors.BadConfig("max_retries must be >= 1")
    return max_retries


def _to_extra_sources(value) -> dict[str, str]:
    if not value:
        return {}
    if not isinstance(value, Mapping):
        raise errors.BadConfig("extra_sources must be a mapping of source -> category")
    bad = {key: category for key, category in value.items() if category not in constants.CATEGORIES}
    if bad:
        raise errors.BadConfig(f"extra_sources has unknown categories: {bad}")
    return {str(key).strip().lower(): category for key, category in value.items()}


def _to_medium_overrides(value) -> dict[str, list[str]]:
    if not value:
        return {}
    if not isinstance(value, Mapping):
        raise errors.BadConfig("medium_overrides must be a mapping of source -> list of mediums")
    overrides = {}
    for source, mediums in value.items():
        if isinstance(mediums, str) or not isinstance(mediums, (list, tuple)):
            raise errors.BadConfig(f"medium_overrides[{source!r}] must be a list")
        overrides[str(source).strip().lower()] = [str(m) for m in mediums]
    return overrides


def load_config(source=None) -> Config:
    """Build a Config from a mapping or a JSON file.

    Environment variables fill in what the source leaves out:
    GA4CHANNEL_DATASET, GA4CHANNEL_TIMEOUT and GA4CHANNEL_MAX_RETRIES.

    Raises:
        errors.BadConfig: When the file is unreadable or a value is invalid.
    """
    data = _read_source(source)
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", unknown)

    dataset = data.get("dataset", os.getenv(constants.ENV_DATASET)) or None

    if "timeout" in data:
        timeout = _to_timeout(data["timeout"])
    elif os.getenv(constants.ENV_TIMEOUT) is not None:
        timeout = _to_timeout(os.getenv(constants.ENV_TIMEOUT))
    else:
        timeout = constants.DEFAULT_TIMEOUT

    max_retries = _to_max_retries(
        data.get("max_retries", os.getenv(constants.ENV_MAX_RETRIES, constants.DEFAULT_MAX_RETRIES))
    )

    return Config(
        dataset=dataset,
        timeout=timeout,
        max_retries=max_retries,
        extra_sources=_to_extra_sources(data.get("extra_sources")),
        medium_overrides=_to_medium_overrides(data.get("medium_overrides")),
    )
