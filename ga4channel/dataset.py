"""Reference dataset: known source names/domains -> content category.

The dataset is a JSON object literal::

    {"google": "SOURCE_CATEGORY_SEARCH", "facebook.com": "SOURCE_CATEGORY_SOCIAL", ...}

It is read once and never mutated. ``load_reference_dataset`` never
raises: on any failure it logs and returns ``EMPTY_DATASET`` so that
classification keeps working on medium/campaign patterns alone.
"""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Mapping, Optional

import requests

from . import constants, errors, retry_utils

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def strip_www(source: str) -> str:
    return source[4:] if source.startswith("www.") else source


@dataclass(frozen=True)
class ReferenceDataset:
    """Immutable source -> category mapping."""
    entries: Mapping[str, str] = field(default_factory=dict)
    origin: Optional[str] = None

    def __post_init__(self):
        entries = _validate_entries(self.entries, self.origin or "<mapping>")
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def category_of(self, source: str) -> Optional[str]:
        """Category of a normalized source, trying it without "www." first."""
        if not source:
            return None
        return self.entries.get(strip_www(source)) or self.entries.get(source)

    def keys_for(self, category: str) -> list[str]:
        """Dataset keys of one category, in dataset order."""
        return [key for key, value in self.entries.items() if value == category]

    def merged(self, extra: Mapping[str, str], origin: Optional[str] = None) -> "ReferenceDataset":
        """Return a new dataset with ``extra`` entries layered on top."""
        if not extra:
            return self
        if not isinstance(extra, Mapping):
            raise errors.DatasetLoadError(origin or "extra entries", f"expected a mapping, got {type(extra).__name__}")
        entries = dict(self.entries)
        entries.update(extra)
        return ReferenceDataset(entries, origin=origin or self.origin)


def _validate_entries(raw, source) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        raise errors.DatasetLoadError(source, f"expected a JSON object, got {type(raw).__name__}")

    entries = {}
    skipped = 0
    for key, category in raw.items():
        if not isinstance(key, str) or category not in constants.CATEGORIES:
            skipped += 1
            continue
        key = key.strip().lower()
        if key:
            entries[key] = category
    if skipped:
        logger.warning("Skipped %s invalid entries in reference dataset %s", skipped, source)
    return entries


EMPTY_DATASET = ReferenceDataset()


def _read_bundled():
    path = resources.files(constants.DATASET_PACKAGE).joinpath(constants.DATASET_FILENAME)
    return json.loads(path.read_text(encoding="utf-8"))


def _read_file(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _origin(source) -> str:
    if source is None:
        return f"{constants.DATASET_PACKAGE}/{constants.DATASET_FILENAME}"
    if isinstance(source, Mapping):
        return "<mapping>"
    if isinstance(source, os.PathLike):
        return str(os.fspath(source))
    if isinstance(source, str):
        return source
    return repr(source)


def _is_url(source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _fetch_url(url: str, *, timeout: Optional[float], max_retries: int, sleep=time.sleep):
    if timeout is not None and timeout <= 0:
        timeout = None

    def _get():
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response

    def _is_retryable(exc: BaseException) -> bool:
        response = getattr(exc, "response", None)
        if response is None:
            return True
        return getattr(response, "status_code", None) in _RETRYABLE_STATUS_CODES

    def _on_retry(attempt_no: int, max_attempts: int, wait: float, exc: BaseException) -> None:
        logger.warning(
            "Fetching reference dataset failed; retrying in %.1fs (%s/%s): %s",
            wait,
            attempt_no,
            max_attempts,
            exc,
        )

    response = retry_utils.expo_retry(
        _get,
        max_retries=max_retries,
        exceptions=(requests.exceptions.RequestException,),
        is_retryable=_is_retryable,
        on_retry=_on_retry,
        sleep=sleep,
    )
    return response.json()


def read_reference_dataset(
    source=None,
    *,
    timeout: Optional[float] = constants.DEFAULT_TIMEOUT,
    max_retries: int = constants.DEFAULT_MAX_RETRIES,
    sleep=time.sleep,
) -> ReferenceDataset:
    """Read and validate a reference dataset.

    Args:
        source: None for the bundled dataset, a mapping, an http(s) URL,
            or a path to a JSON file.
        timeout: HTTP timeout in seconds for URLs. <= 0 disables it.
        max_retries: Attempts for URLs (2 means one retry).
        sleep: Sleep function used between retries.

    Raises:
        errors.DatasetLoadError: When the dataset cannot be read or is not a JSON object.
    """
    origin = _origin(source)

    try:
        if source is None:
            raw = _read_bundled()
        elif isinstance(source, Mapping):
            raw = source
        elif _is_url(source):
            raw = _fetch_url(source, timeout=timeout, max_retries=max_retries, sleep=sleep)
        elif isinstance(source, (str, os.PathLike)):
            raw = _read_file(source)
        else:
            raise errors.DatasetLoadError(origin, f"unsupported source type {type(source).__name__}")
    except requests.exceptions.RequestException as exc:
        raise errors.DatasetLoadError(origin, str(exc)) from exc
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError and requests' JSON errors are ValueErrors
        raise errors.DatasetLoadError(origin, str(exc)) from exc

    loaded = ReferenceDataset(raw, origin=origin)
    logger.info("Loaded %s reference dataset entries from %s", len(loaded), origin)
    return loaded


def load_reference_dataset(source=None, **kwargs) -> ReferenceDataset:
    """Fail-soft variant of ``read_reference_dataset``.

    Returns ``EMPTY_DATASET`` instead of raising when the dataset is unavailable.
    """
    try:
        return read_reference_dataset(source, **kwargs)
    except errors.DatasetLoadError as exc:
        logger.warning("%s; source categories are unavailable", exc)
        return EMPTY_DATASET
