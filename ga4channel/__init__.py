"""Predict GA4 default channel groups from UTM source / medium / campaign."""

from .channels import CHANNEL_RULES, ChannelRule, get_rule
from .classifier import ChannelClassifier, normalize
from .compliance import ComplianceResult, check_compliance
from .constants import CATEGORIES, CHANNEL_NAMES
from .dataset import EMPTY_DATASET, ReferenceDataset, load_reference_dataset, read_reference_dataset
from .recipes.config_loader import Config, load_config
from .start import GA4Channel
from .suggest import SuggestionProvider
from .urls import analyze_url, build_campaign_url, extract_utm_params

__all__ = [
    "CATEGORIES",
    "CHANNEL_NAMES",
    "CHANNEL_RULES",
    "ChannelClassifier",
    "ChannelRule",
    "ComplianceResult",
    "Config",
    "EMPTY_DATASET",
    "GA4Channel",
    "ReferenceDataset",
    "SuggestionProvider",
    "analyze_url",
    "build_campaign_url",
    "check_compliance",
    "extract_utm_params",
    "get_rule",
    "load_config",
    "load_reference_dataset",
    "normalize",
    "read_reference_dataset",
]
