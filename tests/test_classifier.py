import pytest

from ga4channel import constants
from ga4channel.classifier import ChannelClassifier, normalize
from ga4channel.dataset import ReferenceDataset, read_reference_dataset


@pytest.fixture(scope="module")
def classifier():
    return ChannelClassifier(read_reference_dataset())


@pytest.fixture(scope="module")
def degraded():
    return ChannelClassifier()


@pytest.mark.parametrize(
    "source,medium,campaign,expected",
    [
        ("(direct)", "(none)", "", "Direct"),
        ("(direct)", "(not set)", "", "Direct"),
        ("google", "cpc", "spring_sale", "Paid Search"),
        ("bing", "organic", "", "Organic Search"),
        ("newsletter", "email", "", "Email"),
        ("email", "newsletter_link", "", "Email"),
        ("my-custom-crm", "referral_partner_xyz", "", "Unassigned"),
        ("facebook.com", "cpc", "", "Paid Social"),
        ("www.facebook.com", "paid_social", "", "Paid Social"),
        ("youtube", "cpv", "", "Paid Video"),
        ("amazon", "cpc", "", "Paid Shopping"),
        ("google", "cpc", "summer_shopping", "Paid Shopping"),
        ("unknownsite.tld", "cpc", "", "Paid Other"),
        ("google", "performance max", "", "Cross-network"),
        ("google", "cpc", "brand_cross-network", "Cross-network"),
        ("criteo", "banner", "", "Display"),
        ("ebay", "referral", "", "Organic Shopping"),
        ("partner-blog", "referral", "eshop_launch", "Organic Shopping"),
        ("instagram", "referral", "", "Organic Social"),
        ("forum", "social", "", "Organic Social"),
        ("vimeo", "referral", "", "Organic Video"),
        ("partner", "video_embed", "", "Organic Video"),
        ("duckduckgo", "referral", "", "Organic Search"),
        ("blog", "organic", "", "Organic Search"),
        ("impact", "affiliate", "", "Affiliates"),
        ("blog", "partner", "", "Affiliates"),
        ("blog", "referral", "", "Referral"),
        ("blog", "link", "", "Referral"),
        ("spotify", "podcast_ad", "", "Audio"),
        ("sms", "", "", "SMS"),
        ("attentive", "text_message", "", "SMS"),
        ("onesignal", "web_push", "", "Mobile Push Notifications"),
        ("app", "in_app_notification", "", "Mobile Push Notifications"),
        ("firebase", "", "", "Mobile Push Notifications"),
        ("", "", "", "Unassigned"),
    ],
)
def test_classify_scenarios(classifier, source, medium, campaign, expected):
    assert classifier.classify(source, medium, campaign) == expected


def test_case_and_whitespace_insensitive(classifier):
    assert classifier.classify(" Google ", "CPC", "") == classifier.classify("google", "cpc", "")


def test_direct_ignores_campaign(classifier):
    assert classifier.classify("(direct)", "(none)", "anything cross-network shop") == "Direct"


def test_www_prefix_is_not_stripped_for_direct_literal(classifier):
    assert classifier.classify("www.(direct)", "(none)", "") != "Direct"


def test_workshop_campaign_is_not_shopping(classifier):
    assert classifier.classify("unknownsite.tld", "cpc", "spring_workshop") == "Paid Other"


def test_campaign_alone_can_trigger_cross_network(classifier):
    assert classifier.classify("", "", "q3-cross-network") == "Cross-network"


def test_earlier_rule_wins_when_several_match(classifier):
    matches = classifier.matching_channels("facebook.com", "cpc", "")

    assert matches[0] == "Paid Social"
    assert "Paid Other" in matches
    assert classifier.classify("facebook.com", "cpc", "") == matches[0]


def test_matching_channels_always_ends_with_unassigned(classifier):
    assert classifier.matching_channels("blog", "referral")[-1] == "Unassigned"


def test_degraded_mode_uses_patterns_only(degraded):
    assert degraded.dataset.is_empty
    assert degraded.classify("unknownsite.tld", "cpc", "") == "Paid Other"
    assert degraded.classify("google", "cpc", "") == "Paid Other"
    assert degraded.classify("google", "organic", "") == "Organic Search"
    assert degraded.classify("facebook.com", "referral", "") == "Referral"


@pytest.mark.parametrize(
    "source,medium,campaign",
    [
        ("", "", ""),
        (None, None, None),
        (float("nan"), 12, 3.5),
        ("日本語", "メール", "キャンペーン"),
        ("x" * 10000, "paid" * 1000, "shop" * 1000),
        ("\n\t", "cpc\n", "\x00"),
    ],
)
def test_classify_is_total(classifier, degraded, source, medium, campaign):
    for c in (classifier, degraded):
        result = c.classify(source, medium, campaign)
        assert result in constants.CHANNEL_NAMES


def test_classify_is_deterministic(classifier):
    results = {classifier.classify("Google", "CPC", "spring") for _ in range(20)}
    assert results == {"Paid Search"}


def test_normalize():
    assert normalize("  MiXeD ") == "mixed"
    assert normalize(None) == ""
    assert normalize(float("nan")) == ""
    assert normalize(42) == "42"


def test_mixed_case_dataset_keys_still_match():
    ds = ReferenceDataset(
        {
            "Facebook.com": constants.SOURCE_CATEGORY_SOCIAL,
            "WWW.Bing.com": constants.SOURCE_CATEGORY_SEARCH,
        }
    )
    clf = ChannelClassifier(ds)

    assert clf.classify("facebook.com", "cpc") == "Paid Social"
    assert clf.classify("www.bing.com", "cpc") == "Paid Search"
