from __future__ import annotations

import pandas as pd

from .. import errors
from ..classifier import ChannelClassifier
from ..urls import extract_utm_params


def _cell(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


def classify_channel(
    df: pd.DataFrame,
    classifier: ChannelClassifier = None,
    source_col: str = "source",
    medium_col: str = "medium",
    campaign_col: str = "campaign",
) -> pd.Series:
    """Predict the GA4 channel for every row.

    A missing campaign column is treated as empty campaigns.
    """
    for col in [source_col, medium_col]:
        if col not in df.columns:
            raise ValueError(f"Missing column: {col}")

    classifier = classifier or ChannelClassifier()
    has_campaign = campaign_col in df.columns

    def _classify(row):
        campaign = _cell(row.get(campaign_col)) if has_campaign else ""
        return classifier.classify(_cell(row.get(source_col)), _cell(row.get(medium_col)), campaign)

    if df.empty:
        return pd.Series([], index=df.index, dtype=object)
    return df.apply(_classify, axis=1)


def compare_channels(
    df: pd.DataFrame,
    classifier: ChannelClassifier = None,
    expected_col: str = "expected_channel",
    predicted_col: str = "predicted_channel",
    match_col: str = "channel_match",
    **cols,
) -> pd.DataFrame:
    """Add predicted channel and whether it equals the expected channel."""
    if expected_col not in df.columns:
        raise ValueError(f"Missing column: {expected_col}")

    result = df.copy()
    result[predicted_col] = classify_channel(df, classifier, **cols)
    result[match_col] = result[predicted_col] == result[expected_col].map(_cell)
    return result


def utm_frame_from_urls(series: pd.Series) -> pd.DataFrame:
    """Split tagged URLs into utm_source / utm_medium / utm_campaign columns.

    Malformed URLs yield empty strings.
    """
    def _extract(value):
        try:
            return extract_utm_params(value)
        except errors.BadUrlFormat:
            return {"utm_source": "", "utm_medium": "", "utm_campaign": ""}

    records = [_extract(value) for value in series]
    return pd.DataFrame(records, index=series.index, columns=["utm_source", "utm_medium", "utm_campaign"])
