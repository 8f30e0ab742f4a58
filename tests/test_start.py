import json

import pytest

from ga4channel import GA4Channel, constants, errors
from ga4channel.recipes.config_loader import Config


def test_calls_before_load_run_in_degraded_mode():
    app = GA4Channel()

    assert not app.loaded
    assert app.classify("google", "cpc") == "Paid Other"
    assert app.suggest_sources() == ["(direct)", "google", "facebook", "bing", "newsletter"]


def test_load_bundled_dataset_upgrades_predictions():
    app = GA4Channel()

    assert app.load() is True
    assert app.loaded
    assert app.classify("google", "cpc", "spring_sale") == "Paid Search"
    assert app.classifier.dataset is app.dataset
    assert app.suggestions.dataset is app.dataset


def test_failed_load_keeps_working(tmp_path):
    app = GA4Channel()

    assert app.load(tmp_path / "missing.json") is False
    assert app.classify("unknownsite.tld", "cpc") == "Paid Other"


def test_load_merges_extra_sources():
    app = GA4Channel()
    app.load({"google": "SOURCE_CATEGORY_SEARCH"}, extra_sources={"acme.shop": "SOURCE_CATEGORY_SHOPPING"})

    assert app.classify("acme.shop", "cpc") == "Paid Shopping"
    assert app.classify("google", "cpc") == "Paid Search"


def test_from_config(tmp_path):
    path = tmp_path / "map.json"
    path.write_text(json.dumps({"ecosia.org": "SOURCE_CATEGORY_SEARCH"}), encoding="utf-8")
    config = Config(
        dataset=str(path),
        extra_sources={"acme.tv": constants.SOURCE_CATEGORY_VIDEO},
        medium_overrides={"acme": ["cpc", "feed"]},
    )

    app = GA4Channel.from_config(config)

    assert app.classify("ecosia.org", "organic") == "Organic Search"
    assert app.classify("acme.tv", "referral") == "Organic Video"
    assert app.suggest_mediums("acme") == ["cpc", "feed"]


def test_check_and_analyze_url():
    app = GA4Channel()
    app.load()

    result = app.check("facebook.com", "cpc", expected="Paid Social")
    assert result.level == "success"

    analysis = app.analyze_url("https://example.com/?utm_source=bing&utm_medium=organic")
    assert analysis.channel == "Organic Search"

    with pytest.raises(errors.BadUrlFormat):
        app.analyze_url("example.com")


def test_load_ignores_malformed_extra_sources(caplog):
    app = GA4Channel()

    assert app.load(
        {"google": constants.SOURCE_CATEGORY_SEARCH},
        extra_sources=[("acme", constants.SOURCE_CATEGORY_SEARCH)],
    ) is True
    assert app.classify("google", "cpc") == "Paid Search"
    assert app.classify("acme", "cpc") == "Paid Other"
    assert "extra sources are ignored" in caplog.text
