"""Source / medium suggestions for building GA4-friendly UTM values.

Lookup order for mediums when no channel is selected:

1. the per-source override table (exact match on the typed source),
2. the medium list for the source's dataset category,
3. the generic default list.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from . import constants as c
from .channels import get_rule
from .classifier import normalize
from .dataset import EMPTY_DATASET, ReferenceDataset
from .patterns import PAID_MEDIUMS

_PAID = list(PAID_MEDIUMS)

MEDIUMS_BY_CATEGORY = {
    c.SOURCE_CATEGORY_SEARCH: _PAID + [
        "paidsearch", "paid_search", "paid-search", "paidsearches",
        "paidmedia", "paid_media", "paid-media", "organic",
    ],
    c.SOURCE_CATEGORY_SOCIAL: _PAID + [
        "paidsocial", "paid_social", "paid-social", "paidmedia", "paid_media", "paid-media",
        "organic-social", "social-paid", "social-organic", "post", "story", "boost",
        "social_ad", "sm", "social-network", "social-media", "promoted_post", "social_ads",
        "social", "social network", "social media",
    ],
    c.SOURCE_CATEGORY_VIDEO: _PAID + [
        "paidvideo", "paid_video", "paid-video", "video", "video_ad", "instream", "outstream",
        "trueview", "bumper_ad", "video_ads", "organic-video", "video_organic",
        "user_generated_video",
    ],
    c.SOURCE_CATEGORY_SHOPPING: _PAID + [
        "paidshopping", "paid_shopping", "paid-shopping", "shopping", "product_listing_ad",
        "pla", "feed", "merchant_center", "shopping_ads", "organic-shopping",
        "product_listing_organic", "shop",
    ],
}

DEFAULT_MEDIUMS = [
    "cpc", "ppc", "paid", "email", "e-mail", "e_mail", "e mail", "social", "referral",
    "link", "app", "display", "banner", "expandable", "interstitial", "cpm", "organic",
    "qr_code", "push", "notification", "mobile", "mobile_push", "app_notification",
    "partner", "podcast", "audio", "sms", "retargeting", "video", "shopping", "affiliate",
    "cross-network", "demand gen", "performance max", "smart shopping", "(not set)", "(none)",
]

DEFAULT_SOURCES = ["(direct)", "google", "facebook", "bing", "newsletter"]

_FACEBOOK = ["cpc", "social", "paid-social", "paidsocial", "post", "story", "boost",
             "lead_ad", "messenger_ad", "ppc", "paid", "social_ads"]
_INSTAGRAM = ["cpc", "social", "paid-social", "paidsocial", "post", "story",
              "ig_shopping_ad", "ppc", "paid", "social_ads"]
_LINKEDIN = ["cpc", "social", "paid-social", "paidsocial", "sponsored_content",
             "sponsored_inmail", "text_ad", "ppc", "paid", "social_ads"]
_YOUTUBE = ["video", "cpc", "display", "social", "video_ad", "instream", "outstream",
            "masthead", "organic-video", "paid-video", "trueview_in-stream_ad",
            "trueview_discovery_ad", "bumper_ad", "ppc", "paid", "video_ads"]
_TWITTER = ["social", "cpc", "tweet", "paidsocial", "promoted_tweet", "ppc", "paid", "social_ads"]
_PINTEREST = ["social", "cpc", "pin", "promoted_pin", "paidsocial", "ppc", "paid", "social_ads"]
_TIKTOK = ["social", "cpc", "video", "paidsocial", "video_ad", "ppc", "paid", "social_ads"]
_REDDIT = ["social", "cpc", "post", "paidsocial", "promoted_post", "ppc", "paid", "social_ads"]
_AMAZON = ["cpc", "sponsored_products", "display", "shopping", "marketplace", "pla",
           "ppc", "paid", "shopping_ads"]

MEDIUMS_BY_SOURCE = {
    "google": ["cpc", "organic", "display", "video", "shopping", "youtube_ad", "discovery_ad",
               "performance_max", "feed", "paidsearch", "ppc", "paid", "search_ads",
               "video_ads", "shopping_ads"],
    "facebook": _FACEBOOK,
    "facebook.com": _FACEBOOK,
    "instagram": _INSTAGRAM,
    "instagram.com": _INSTAGRAM,
    "linkedin": _LINKEDIN,
    "linkedin.com": _LINKEDIN,
    "youtube": _YOUTUBE,
    "youtube.com": _YOUTUBE,
    "newsletter": ["email", "newsletter_link", "e-mail", "e_mail", "e-newsletter"],
    "email": ["email", "blast", "automated_email", "transactional_email", "e-mail", "e_mail", "e-blast"],
    "bing": ["cpc", "organic", "paidsearch", "ppc", "paid", "search_ads"],
    "duckduckgo": ["organic", "cpc", "paidsearch", "ppc", "paid", "search_ads"],
    "twitter": _TWITTER,
    "twitter.com": _TWITTER,
    "pinterest": _PINTEREST,
    "pinterest.com": _PINTEREST,
    "tiktok": _TIKTOK,
    "tiktok.com": _TIKTOK,
    "reddit": _REDDIT,
    "reddit.com": _REDDIT,
    "amazon": _AMAZON,
    "amazon.com": _AMAZON,
}


def _unique_filtered(values: Iterable[str], filter_text: str) -> list[str]:
    needle = normalize(filter_text)
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        if needle and needle not in value.lower():
            continue
        result.append(value)
    return result


class SuggestionProvider(object):
    """Read-side helper over the reference dataset and channel rules."""

    def __init__(
        self,
        dataset: Optional[ReferenceDataset] = None,
        medium_overrides: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        self.dataset = dataset if dataset is not None else EMPTY_DATASET
        overrides = dict(MEDIUMS_BY_SOURCE)
        for source, mediums in (medium_overrides or {}).items():
            overrides[normalize(source)] = list(mediums)
        self.medium_overrides = overrides

    def _all_sources(self) -> list[str]:
        if self.dataset.is_empty:
            return list(DEFAULT_SOURCES)
        return sorted(self.dataset.entries)

    def suggest_sources(self, channel: Optional[str] = "", filter_text: str = "") -> list[str]:
        """Candidate utm_source values.

        With a channel: its recommended sources, else the dataset entries of
        its target category (dataset order), else every source. Without a
        channel: every dataset source, alphabetically. Falls back to a short
        default list while the dataset is empty.

        Raises:
            errors.UnknownChannel: When ``channel`` is not a known channel name.
        """
        if channel:
            rule = get_rule(channel)
            if rule.recommended_sources:
                sources = list(rule.recommended_sources)
            elif rule.target_category and not self.dataset.is_empty:
                sources = self.dataset.keys_for(rule.target_category)
            else:
                sources = self._all_sources()
        else:
            sources = self._all_sources()
        return _unique_filtered(sources, filter_text)

    def mediums_for_source(self, source: str) -> list[str]:
        source = normalize(source)
        if source in self.medium_overrides:
            return list(self.medium_overrides[source])
        category = self.dataset.category_of(source)
        if category in MEDIUMS_BY_CATEGORY:
            return list(MEDIUMS_BY_CATEGORY[category])
        return list(DEFAULT_MEDIUMS)

    def suggest_mediums(
        self,
        source: Optional[str] = "",
        channel: Optional[str] = "",
        filter_text: str = "",
    ) -> list[str]:
        """Candidate utm_medium values, in list order.

        A selected channel wins over the typed source.

        Raises:
            errors.UnknownChannel: When ``channel`` is not a known channel name.
        """
        if channel:
            rule = get_rule(channel)
            if rule.recommended_mediums or rule.target_category is None:
                mediums = list(rule.recommended_mediums)
            else:
                mediums = list(MEDIUMS_BY_CATEGORY[rule.target_category])
        else:
            mediums = self.mediums_for_source(source)
        return _unique_filtered(mediums, filter_text)
