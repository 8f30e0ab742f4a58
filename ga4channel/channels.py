"""GA4 default channel group rules.

``CHANNEL_RULES`` is evaluated top to bottom and the first rule whose
predicate holds wins. A paid click from a known shopping site with a
"cpc" medium satisfies Paid Shopping and Paid Other; order decides.
"Unassigned" is last and has no predicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import constants as c
from . import errors
from . import patterns as p
from .matchers import CategoryMatchers

Predicate = Callable[[str, str, str, CategoryMatchers], bool]

_PAID_CONDITION = "Medium matches regex ^(cpc|cpa|cpv|cpl|cpp|cpd|cpn|ecpc|ppc|retargeting|.*paid.*)$"


@dataclass(frozen=True)
class ChannelRule:
    name: str
    description: str
    condition: str
    predicate: Optional[Predicate] = None
    recommended_mediums: tuple = ()
    recommended_sources: Optional[tuple] = None
    target_category: Optional[str] = None

    def matches(self, source: str, medium: str, campaign: str, matchers: CategoryMatchers) -> bool:
        if self.predicate is None:
            return True
        return self.predicate(source, medium, campaign, matchers)


def _direct(source, medium, campaign, m):
    return source == "(direct)" and medium in ("(not set)", "(none)")


def _cross_network(source, medium, campaign, m):
    return "cross-network" in campaign or medium in p.CROSS_NETWORK_MEDIUMS


def _shopping(source, campaign, m):
    return m.is_known_shopping_site(source) or p.is_shopping_campaign_signal(campaign)


def _paid_shopping(source, medium, campaign, m):
    return p.is_paid_medium(medium) and _shopping(source, campaign, m)


def _paid_search(source, medium, campaign, m):
    return p.is_paid_medium(medium) and m.is_known_search_site(source)


def _paid_social(source, medium, campaign, m):
    return p.is_paid_medium(medium) and m.is_known_social_site(source)


def _paid_video(source, medium, campaign, m):
    return p.is_paid_medium(medium) and m.is_known_video_site(source)


def _paid_other(source, medium, campaign, m):
    return p.is_paid_medium(medium)


def _display(source, medium, campaign, m):
    return medium in p.DISPLAY_MEDIUMS


def _organic_shopping(source, medium, campaign, m):
    return not p.is_paid_medium(medium) and _shopping(source, campaign, m)


def _organic_social(source, medium, campaign, m):
    return not p.is_paid_medium(medium) and (
        m.is_known_social_site(source) or medium in p.ORGANIC_SOCIAL_MEDIUMS
    )


def _organic_video(source, medium, campaign, m):
    return not p.is_paid_medium(medium) and (
        m.is_known_video_site(source) or p.is_organic_video_medium(medium)
    )


def _organic_search(source, medium, campaign, m):
    return not p.is_paid_medium(medium) and (m.is_known_search_site(source) or medium == "organic")


def _email(source, medium, campaign, m):
    return p.is_email_signal(source) or p.is_email_signal(medium)


def _affiliates(source, medium, campaign, m):
    return medium in p.AFFILIATE_MEDIUMS


def _referral(source, medium, campaign, m):
    return medium in p.REFERRAL_MEDIUMS


def _audio(source, medium, campaign, m):
    return medium in p.AUDIO_MEDIUMS


def _sms(source, medium, campaign, m):
    return source == "sms" or medium in p.SMS_MEDIUMS


def _mobile_push(source, medium, campaign, m):
    return (
        medium.endswith("push")
        or "mobile" in medium
        or "notification" in medium
        or source == "firebase"
        or medium == "web_push"
    )


CHANNEL_RULES = (
    ChannelRule(
        c.DIRECT,
        "Users who typed your site's URL directly or used bookmarks.",
        'Source exactly matches "(direct)" AND Medium is one of ("(not set)", "(none)")',
        _direct,
        recommended_mediums=("(not set)", "(none)"),
        recommended_sources=("(direct)",),
    ),
    ChannelRule(
        c.CROSS_NETWORK,
        "Users from ads on various networks (e.g., Performance Max, Smart Shopping, Demand Gen).",
        "Campaign Name contains 'cross-network' OR Medium is one of "
        "('cross-network', 'demand gen', 'performance max', 'smart shopping')",
        _cross_network,
        recommended_mediums=p.CROSS_NETWORK_MEDIUMS,
        recommended_sources=(
            "google", "microsoft", "facebook", "instagram", "youtube",
            "demandbase", "linkedin", "criteo", "taboola", "outbrain",
        ),
    ),
    ChannelRule(
        c.PAID_SHOPPING,
        "Users from paid ads on shopping platforms.",
        "(Source matches a list of shopping sites OR Campaign Name matches regex "
        f"^(.*(([^a-df-z]|^)shop|shopping).*)$) AND {_PAID_CONDITION}",
        _paid_shopping,
        recommended_mediums=p.PAID_MEDIUMS + ("paidshopping", "paid_shopping", "paid-shopping"),
        target_category=c.SOURCE_CATEGORY_SHOPPING,
    ),
    ChannelRule(
        c.PAID_SEARCH,
        "Users from paid search engine ads.",
        f"Source matches a list of search sites AND {_PAID_CONDITION}",
        _paid_search,
        recommended_mediums=p.PAID_MEDIUMS + ("paidsearch", "paid_search", "paid-search", "paidsearches"),
        target_category=c.SOURCE_CATEGORY_SEARCH,
    ),
    ChannelRule(
        c.PAID_SOCIAL,
        "Users from paid ads on social media.",
        f"Source matches a list of social sites AND {_PAID_CONDITION}",
        _paid_social,
        recommended_mediums=p.PAID_MEDIUMS + ("paidsocial", "paid_social", "paid-social"),
        target_category=c.SOURCE_CATEGORY_SOCIAL,
    ),
    ChannelRule(
        c.PAID_VIDEO,
        "Users from paid video ads.",
        f"Source matches a list of video sites AND {_PAID_CONDITION}",
        _paid_video,
        recommended_mediums=p.PAID_MEDIUMS + (
            "paidmedia", "paid_media", "paid-media", "paidvideo", "paid_video", "paid-video",
        ),
        target_category=c.SOURCE_CATEGORY_VIDEO,
    ),
    ChannelRule(
        c.PAID_OTHER,
        "Users from other paid ads not fitting other categories.",
        _PAID_CONDITION,
        _paid_other,
        recommended_mediums=p.PAID_MEDIUMS + ("paid_other", "paid-other"),
    ),
    ChannelRule(
        c.DISPLAY,
        "Users from display ads.",
        "Medium is one of ('display', 'banner', 'expandable', 'interstitial', 'cpm')",
        _display,
        recommended_mediums=p.DISPLAY_MEDIUMS,
        recommended_sources=(
            "google", "criteo", "adroll", "taboola", "outbrain", "linkedin",
            "facebook", "instagram", "twitter", "bing", "yahoo",
        ),
    ),
    ChannelRule(
        c.ORGANIC_SHOPPING,
        "Users from unpaid links on shopping platforms.",
        "Source matches a list of shopping sites OR Campaign name matches regex "
        "^(.*(([^a-df-z]|^)shop|shopping).*)$",
        _organic_shopping,
        recommended_mediums=("shop", "shopping", "organic-shopping", "feed", "product_listing_organic"),
        target_category=c.SOURCE_CATEGORY_SHOPPING,
    ),
    ChannelRule(
        c.ORGANIC_SOCIAL,
        "Users from unpaid links on social media.",
        "Source matches a list of social sites OR Medium is one of "
        "('social', 'social-network', 'social-media', 'sm', 'social network', 'social media')",
        _organic_social,
        recommended_mediums=p.ORGANIC_SOCIAL_MEDIUMS,
        target_category=c.SOURCE_CATEGORY_SOCIAL,
    ),
    ChannelRule(
        c.ORGANIC_VIDEO,
        "Users from unpaid links on video platforms.",
        "Source matches a list of video sites OR Medium matches regex ^(.*video.*)$",
        _organic_video,
        recommended_mediums=("video", "organic-video", "video_organic", "user_generated_video"),
        target_category=c.SOURCE_CATEGORY_VIDEO,
    ),
    ChannelRule(
        c.ORGANIC_SEARCH,
        "Users from unpaid search engine results.",
        "Source matches a list of search sites OR Medium exactly matches 'organic'",
        _organic_search,
        recommended_mediums=("organic",),
        target_category=c.SOURCE_CATEGORY_SEARCH,
    ),
    ChannelRule(
        c.EMAIL,
        "Users from links in emails.",
        "Source matches regex for email OR Medium matches regex for email",
        _email,
        recommended_mediums=("email", "e-mail", "e_mail", "e mail", "newsletter"),
        recommended_sources=(
            "email", "newsletter", "klaviyo", "mailchimp", "hubspot",
            "activecampaign", "pardot", "sendgrid", "constantcontact",
        ),
    ),
    ChannelRule(
        c.AFFILIATES,
        "Users from links on affiliate websites.",
        "Medium is one of ('affiliate', 'affiliates', 'partner')",
        _affiliates,
        recommended_mediums=p.AFFILIATE_MEDIUMS,
        recommended_sources=(
            "shareasale", "impact", "cj", "rakutenadvertising", "partnerstack", "awin", "pepperjam",
        ),
    ),
    ChannelRule(
        c.REFERRAL,
        "Users from links on other websites.",
        "Medium is one of ('referral', 'app', 'link')",
        _referral,
        recommended_mediums=("referral", "link", "app"),
    ),
    ChannelRule(
        c.AUDIO,
        "Users from audio ads or content.",
        "Medium is one of ('audio', 'podcast_ad', 'streaming_audio_ad')",
        _audio,
        recommended_mediums=p.AUDIO_MEDIUMS,
        recommended_sources=(
            "spotify", "pandora", "iheartradio", "soundcloud", "tunein", "google_audio_ads",
        ),
    ),
    ChannelRule(
        c.SMS,
        "Users from links in text messages.",
        "Source exactly matches 'sms' OR Medium is one of ('sms', 'text_message')",
        _sms,
        recommended_mediums=p.SMS_MEDIUMS,
        recommended_sources=(
            "sms", "attentive", "postscript", "twilio", "voyage", "klaviyo_sms", "manychat_sms",
        ),
    ),
    ChannelRule(
        c.MOBILE_PUSH_NOTIFICATIONS,
        "Users from mobile app push notifications.",
        "Medium ends with 'push' OR Medium contains 'mobile' or 'notification' "
        "OR Source exactly matches 'firebase'",
        _mobile_push,
        recommended_mediums=("push", "mobile", "notification", "mobile_push", "app_notification", "web_push"),
        recommended_sources=("firebase", "onesignal", "clevertap", "iterable", "braze", "urbanairship"),
    ),
    ChannelRule(
        c.UNASSIGNED,
        "Traffic that doesn't match any other channel definition.",
        "None of the other rules match.",
    ),
)

_RULES_BY_NAME = {rule.name: rule for rule in CHANNEL_RULES}


def get_rule(name: str) -> ChannelRule:
    """Look up a rule by its channel label (exact, case-sensitive)."""
    try:
        return _RULES_BY_NAME[name]
    except KeyError:
        raise errors.UnknownChannel(name) from None
