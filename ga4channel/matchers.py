"""Known-site predicates derived from the reference dataset."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants
from .dataset import ReferenceDataset, strip_www


@dataclass(frozen=True)
class CategoryMatchers:
    search: frozenset = frozenset()
    social: frozenset = frozenset()
    shopping: frozenset = frozenset()
    video: frozenset = frozenset()

    @classmethod
    def from_dataset(cls, dataset: ReferenceDataset) -> "CategoryMatchers":
        return cls(
            search=frozenset(dataset.keys_for(constants.SOURCE_CATEGORY_SEARCH)),
            social=frozenset(dataset.keys_for(constants.SOURCE_CATEGORY_SOCIAL)),
            shopping=frozenset(dataset.keys_for(constants.SOURCE_CATEGORY_SHOPPING)),
            video=frozenset(dataset.keys_for(constants.SOURCE_CATEGORY_VIDEO)),
        )

    @staticmethod
    def _known(source: str, keys: frozenset) -> bool:
        if not source or not keys:
            return False
        source = source.strip().lower()
        return source in keys or strip_www(source) in keys

    def is_known_search_site(self, source: str) -> bool:
        return self._known(source, self.search)

    def is_known_social_site(self, source: str) -> bool:
        return self._known(source, self.social)

    def is_known_shopping_site(self, source: str) -> bool:
        return self._known(source, self.shopping)

    def is_known_video_site(self, source: str) -> bool:
        return self._known(source, self.video)


EMPTY_MATCHERS = CategoryMatchers()
