"""An app object that bundles the dataset, the classifier and suggestions
"""

from __future__ import annotations

import logging
from typing import Optional

from . import dataset as ds
from . import errors
from .classifier import ChannelClassifier
from .compliance import ComplianceResult, check_compliance
from .recipes.config_loader import Config
from .suggest import SuggestionProvider
from .urls import UrlAnalysis, analyze_url

logger = logging.getLogger(__name__)


class GA4Channel:
    """GA4 channel predictor.

    Until ``load()`` is called the app runs on an empty dataset: every
    call works, known-site rules just never match.
    """

    def __init__(self, dataset: Optional[ds.ReferenceDataset] = None, medium_overrides=None):
        self.medium_overrides = dict(medium_overrides or {})
        self._set_dataset(dataset if dataset is not None else ds.EMPTY_DATASET)

    @classmethod
    def from_config(cls, config: Config) -> "GA4Channel":
        app = cls(medium_overrides=config.medium_overrides)
        app.load(
            config.dataset,
            timeout=config.timeout,
            max_retries=config.max_retries,
            extra_sources=config.extra_sources,
        )
        return app

    def _set_dataset(self, dataset: ds.ReferenceDataset):
        classifier = ChannelClassifier(dataset)
        suggestions = SuggestionProvider(dataset, self.medium_overrides)
        # swap together so readers never see a half-updated app
        self._state = (dataset, classifier, suggestions)

    @property
    def dataset(self) -> ds.ReferenceDataset:
        return self._state[0]

    @property
    def classifier(self) -> ChannelClassifier:
        return self._state[1]

    @property
    def suggestions(self) -> SuggestionProvider:
        return self._state[2]

    @property
    def loaded(self) -> bool:
        return not self.dataset.is_empty

    def load(self, source=None, *, extra_sources=None, **kwargs) -> bool:
        """Load the reference dataset once (fail-soft).

        Returns True when a non-empty dataset is in place afterwards.
        """
        dataset = ds.load_reference_dataset(source, **kwargs)
        if extra_sources:
            try:
                dataset = dataset.merged(extra_sources, origin=dataset.origin)
            except errors.DatasetLoadError as exc:
                logger.warning("%s; extra sources are ignored", exc)
        if dataset.is_empty:
            logger.warning("Reference dataset is empty; channel prediction uses medium/campaign rules only.")
        self._set_dataset(dataset)
        return self.loaded

    def classify(self, source, medium, campaign="") -> str:
        return self.classifier.classify(source, medium, campaign)

    def suggest_sources(self, channel: Optional[str] = "", filter_text: str = "") -> list[str]:
        return self.suggestions.suggest_sources(channel, filter_text)

    def suggest_mediums(self, source: Optional[str] = "", channel: Optional[str] = "", filter_text: str = "") -> list[str]:
        return self.suggestions.suggest_mediums(source, channel, filter_text)

    def check(self, source, medium, campaign="", expected: Optional[str] = None) -> ComplianceResult:
        return check_compliance(self.classifier, source, medium, campaign, expected)

    def analyze_url(self, url: str) -> UrlAnalysis:
        return analyze_url(self.classifier, url)
