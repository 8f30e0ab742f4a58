import numpy as np
import pandas as pd
import pytest

from ga4channel.classifier import ChannelClassifier
from ga4channel.dataset import read_reference_dataset
from ga4channel.transform.ga4 import classify_channel, compare_channels, utm_frame_from_urls


@pytest.fixture(scope="module")
def classifier():
    return ChannelClassifier(read_reference_dataset())


def test_classify_channel_per_row(classifier):
    df = pd.DataFrame(
        [
            {"source": "google", "medium": "cpc", "campaign": "spring_sale"},
            {"source": "(direct)", "medium": "(none)", "campaign": None},
            {"source": "Facebook.com", "medium": "CPC", "campaign": np.nan},
            {"source": np.nan, "medium": np.nan, "campaign": "x-cross-network"},
            {"source": "my-custom-crm", "medium": "referral_partner_xyz", "campaign": ""},
        ]
    )

    result = classify_channel(df, classifier)
    assert result.tolist() == [
        "Paid Search",
        "Direct",
        "Paid Social",
        "Cross-network",
        "Unassigned",
    ]


def test_classify_channel_custom_columns_without_campaign(classifier):
    df = pd.DataFrame({"src": ["bing"], "med": ["organic"]})
    result = classify_channel(df, classifier, source_col="src", medium_col="med")
    assert result.tolist() == ["Organic Search"]


def test_classify_channel_missing_column_raises(classifier):
    df = pd.DataFrame({"source": ["google"]})
    with pytest.raises(ValueError, match="Missing column: medium"):
        classify_channel(df, classifier)


def test_classify_channel_empty_frame(classifier):
    df = pd.DataFrame(columns=["source", "medium"])
    assert classify_channel(df, classifier).empty


def test_classify_channel_defaults_to_degraded_classifier():
    df = pd.DataFrame({"source": ["google"], "medium": ["cpc"]})
    assert classify_channel(df).tolist() == ["Paid Other"]


def test_compare_channels_flags_mismatch(classifier):
    df = pd.DataFrame(
        {
            "source": ["google", "facebook.com"],
            "medium": ["cpc", "cpc"],
            "expected_channel": ["Paid Search", "Paid Search"],
        }
    )

    result = compare_channels(df, classifier)

    assert result["predicted_channel"].tolist() == ["Paid Search", "Paid Social"]
    assert result["channel_match"].tolist() == [True, False]
    assert "predicted_channel" not in df.columns


def test_utm_frame_from_urls_blanks_malformed_rows():
    series = pd.Series(
        [
            "https://example.com/?utm_source=google&utm_medium=cpc&utm_campaign=brand",
            "not a url",
            None,
        ],
        index=[10, 11, 12],
    )

    result = utm_frame_from_urls(series)

    assert list(result.columns) == ["utm_source", "utm_medium", "utm_campaign"]
    assert result.index.tolist() == [10, 11, 12]
    assert result.loc[10].tolist() == ["google", "cpc", "brand"]
    assert result.loc[11].tolist() == ["", "", ""]
    assert result.loc[12].tolist() == ["", "", ""]
