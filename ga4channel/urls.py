"""Campaign URL helpers: read UTM parameters from a URL, build tagged URLs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import parse_qs, quote, urlsplit

from . import constants, errors

logger = logging.getLogger(__name__)

_ALL_PARAMS = constants.UTM_PARAMS + constants.GA4_PARAMS


@dataclass
class UrlAnalysis:
    source: str
    medium: str
    campaign: str
    channel: str


def is_valid_base_url(url: str) -> bool:
    """Base URL accepted by the builder: empty, or starts with http:// or https://."""
    url = (url or "").strip()
    return url == "" or url.startswith(("http://", "https://"))


def extract_utm_params(url: str) -> dict[str, str]:
    """Read utm_source / utm_medium / utm_campaign from an absolute URL.

    Missing parameters are returned as "". The first value wins when a
    parameter is repeated.

    Raises:
        errors.BadUrlFormat: When ``url`` has no scheme or host.
    """
    if not isinstance(url, str) or not url.strip():
        raise errors.BadUrlFormat(url)
    try:
        parts = urlsplit(url.strip())
    except ValueError as exc:
        raise errors.BadUrlFormat(url) from exc
    if not parts.scheme or not parts.netloc:
        raise errors.BadUrlFormat(url)

    query = parse_qs(parts.query, keep_blank_values=True)
    return {
        name: query.get(name, [""])[0]
        for name in ("utm_source", "utm_medium", "utm_campaign")
    }


def analyze_url(classifier, url: str) -> UrlAnalysis:
    """Predict the channel a tagged URL will land in.

    Raises:
        errors.BadUrlFormat: When ``url`` is not an absolute URL.
        errors.MissingUtmParameters: When neither utm_source nor utm_medium is set.
    """
    params = extract_utm_params(url)
    source = params["utm_source"]
    medium = params["utm_medium"]
    campaign = params["utm_campaign"]
    if not source and not medium:
        raise errors.MissingUtmParameters(["utm_source", "utm_medium"])
    return UrlAnalysis(
        source=source,
        medium=medium,
        campaign=campaign,
        channel=classifier.classify(source, medium, campaign),
    )


def params_with_whitespace(params: Mapping[str, Optional[str]]) -> list[str]:
    """Names of parameters whose value contains whitespace."""
    return [name for name, value in params.items() if isinstance(value, str) and re.search(r"\s", value)]


def _encode(value: str) -> str:
    # same reserved set as JavaScript's encodeURIComponent
    return quote(value, safe="!*'()")


def build_campaign_url(base_url: str, params: Mapping[str, Optional[str]], force_lowercase: bool = True) -> str:
    """Append GA4 campaign parameters to ``base_url``.

    Args:
        base_url: Landing page URL starting with http:// or https://.
        params: Parameter name -> value. Empty values are dropped.
        force_lowercase: Lowercase every value before encoding.

    Returns:
        The tagged URL.

    Raises:
        errors.BadUrlFormat: When ``base_url`` is empty or not http(s).
        errors.MissingUtmParameters: When source, medium or campaign is empty.
    """
    base = (base_url or "").strip()
    if not base or not is_valid_base_url(base):
        raise errors.BadUrlFormat(base_url)

    unknown = [name for name in params if name not in _ALL_PARAMS]
    if unknown:
        logger.warning("Ignoring unknown campaign parameters: %s", unknown)

    values = {}
    for name in _ALL_PARAMS:
        value = params.get(name)
        value = value.strip() if isinstance(value, str) else ""
        if value:
            values[name] = value.lower() if force_lowercase else value

    missing = [name for name in constants.REQUIRED_UTM_PARAMS if name not in values]
    if missing:
        raise errors.MissingUtmParameters(missing)

    query = "&".join(f"{_encode(name)}={_encode(value)}" for name, value in values.items())
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}"
