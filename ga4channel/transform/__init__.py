from .classify import infer_category_by_domain
from .ga4 import classify_channel, compare_channels, utm_frame_from_urls

__all__ = [
    "classify_channel",
    "compare_channels",
    "utm_frame_from_urls",
    "infer_category_by_domain",
]
