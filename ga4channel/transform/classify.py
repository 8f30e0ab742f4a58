from __future__ import annotations

from urllib.parse import urlparse

from ..dataset import ReferenceDataset


def infer_category_by_domain(series, dataset: ReferenceDataset, default=None):
    """Map URL or host cells to their reference dataset category.

    Exact host match only ("www." is ignored); subdomains are not walked up.
    """
    if series is None:
        return series

    def _infer(value):
        if not isinstance(value, str) or not value.strip():
            return default
        value = value.strip()
        domain = urlparse(value).netloc if "://" in value else value
        domain = domain.lower().split(":")[0]
        return dataset.category_of(domain) or default

    return series.apply(_infer)
