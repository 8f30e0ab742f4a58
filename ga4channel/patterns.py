"""Medium and campaign signals used by the channel rules.

These are fixed and do not depend on the reference dataset. All
functions expect values that are already trimmed and lowercased, but
match case-insensitively anyway.
"""

from __future__ import annotations

import re

_PAID_MEDIUM = re.compile(
    r"^(cpc|cpa|cpv|cpl|cpp|cpd|cpn|ecpc|ppc|retargeting|.*paid.*)$",
    re.IGNORECASE | re.DOTALL,
)
_EMAIL = re.compile(r"^(email|e[-_\s]?mail)$", re.IGNORECASE)
# "shop" not preceded by a-d or f-z, so "workshop" is out but "eshop" is in.
_SHOPPING_CAMPAIGN = re.compile(r"(([^a-df-z]|^)shop|shopping)", re.IGNORECASE)
_SHOPPING_CAMPAIGN_EXACT = frozenset({"organic-shopping", "product_listing_organic", "feed"})
_ORGANIC_VIDEO_EXACT = frozenset({"organic-video", "video_organic", "user_generated_video"})

# Literal forms of the paid medium pattern, for suggestions
PAID_MEDIUMS = ("cpc", "cpa", "cpv", "cpl", "cpp", "cpd", "cpn", "ecpc", "ppc", "retargeting", "paid")

ORGANIC_SOCIAL_MEDIUMS = (
    "social",
    "social-network",
    "social-media",
    "sm",
    "social network",
    "social media",
    "social_organic",
    "organic_social",
)
REFERRAL_MEDIUMS = ("referral", "app", "link")
DISPLAY_MEDIUMS = ("display", "banner", "expandable", "interstitial", "cpm")
CROSS_NETWORK_MEDIUMS = ("cross-network", "demand gen", "performance max", "smart shopping")
AFFILIATE_MEDIUMS = ("affiliate", "affiliates", "partner")
AUDIO_MEDIUMS = ("audio", "podcast_ad", "streaming_audio_ad")
SMS_MEDIUMS = ("sms", "text_message")


def is_paid_medium(medium: str) -> bool:
    """cpc-style medium, or any medium containing "paid"."""
    return bool(_PAID_MEDIUM.match(medium))


def is_email_signal(value: str) -> bool:
    return bool(_EMAIL.match(value))


def is_shopping_campaign_signal(campaign: str) -> bool:
    """Campaign name that signals shopping intent.

    The match is loose: "shopper_survey" or "workshopping" count as
    shopping campaigns, which misclassifies some unrelated campaigns.
    """
    if campaign.lower() in _SHOPPING_CAMPAIGN_EXACT:
        return True
    return bool(_SHOPPING_CAMPAIGN.search(campaign))


def is_organic_video_medium(medium: str) -> bool:
    medium = medium.lower()
    return "video" in medium or medium in _ORGANIC_VIDEO_EXACT

