"""Predict the GA4 default channel for a source / medium / campaign triple."""

from __future__ import annotations

import math
from typing import Optional

from . import constants
from .channels import CHANNEL_RULES
from .dataset import EMPTY_DATASET, ReferenceDataset
from .matchers import CategoryMatchers


def normalize(value) -> str:
    """Trim and lowercase a UTM value. None and NaN become ""."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.strip().lower()


class ChannelClassifier(object):
    """First-match-wins evaluation of ``CHANNEL_RULES``.

    Stateless after construction; safe to share between threads.
    """

    def __init__(self, dataset: Optional[ReferenceDataset] = None, rules=CHANNEL_RULES):
        self.dataset = dataset if dataset is not None else EMPTY_DATASET
        self.matchers = CategoryMatchers.from_dataset(self.dataset)
        self.rules = tuple(rules)

    def classify(self, source, medium, campaign="") -> str:
        """Return the channel label. Never raises, never returns ""."""
        source, medium, campaign = normalize(source), normalize(medium), normalize(campaign)
        for rule in self.rules:
            if rule.matches(source, medium, campaign, self.matchers):
                return rule.name
        return constants.UNASSIGNED

    def matching_channels(self, source, medium, campaign="") -> list[str]:
        """Every channel whose condition holds, in priority order.

        The first item is what ``classify`` returns.
        """
        source, medium, campaign = normalize(source), normalize(medium), normalize(campaign)
        return [
            rule.name
            for rule in self.rules
            if rule.matches(source, medium, campaign, self.matchers)
        ]
