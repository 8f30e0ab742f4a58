"""Channel and category constants
"""

# Content categories used by the reference dataset
SOURCE_CATEGORY_SEARCH = 'SOURCE_CATEGORY_SEARCH'
SOURCE_CATEGORY_SOCIAL = 'SOURCE_CATEGORY_SOCIAL'
SOURCE_CATEGORY_SHOPPING = 'SOURCE_CATEGORY_SHOPPING'
SOURCE_CATEGORY_VIDEO = 'SOURCE_CATEGORY_VIDEO'

CATEGORIES = (
    SOURCE_CATEGORY_SEARCH,
    SOURCE_CATEGORY_SOCIAL,
    SOURCE_CATEGORY_SHOPPING,
    SOURCE_CATEGORY_VIDEO,
)

# GA4 default channel group labels, in evaluation order
DIRECT = 'Direct'
CROSS_NETWORK = 'Cross-network'
PAID_SHOPPING = 'Paid Shopping'
PAID_SEARCH = 'Paid Search'
PAID_SOCIAL = 'Paid Social'
PAID_VIDEO = 'Paid Video'
PAID_OTHER = 'Paid Other'
DISPLAY = 'Display'
ORGANIC_SHOPPING = 'Organic Shopping'
ORGANIC_SOCIAL = 'Organic Social'
ORGANIC_VIDEO = 'Organic Video'
ORGANIC_SEARCH = 'Organic Search'
EMAIL = 'Email'
AFFILIATES = 'Affiliates'
REFERRAL = 'Referral'
AUDIO = 'Audio'
SMS = 'SMS'
MOBILE_PUSH_NOTIFICATIONS = 'Mobile Push Notifications'
UNASSIGNED = 'Unassigned'

CHANNEL_NAMES = (
    DIRECT,
    CROSS_NETWORK,
    PAID_SHOPPING,
    PAID_SEARCH,
    PAID_SOCIAL,
    PAID_VIDEO,
    PAID_OTHER,
    DISPLAY,
    ORGANIC_SHOPPING,
    ORGANIC_SOCIAL,
    ORGANIC_VIDEO,
    ORGANIC_SEARCH,
    EMAIL,
    AFFILIATES,
    REFERRAL,
    AUDIO,
    SMS,
    MOBILE_PUSH_NOTIFICATIONS,
    UNASSIGNED,
)

# Bundled reference dataset (package data)
DATASET_PACKAGE = 'ga4channel.data'
DATASET_FILENAME = 'source_category_map.json'

# Environment variables read by the config loader
ENV_DATASET = 'GA4CHANNEL_DATASET'
ENV_TIMEOUT = 'GA4CHANNEL_TIMEOUT'
ENV_MAX_RETRIES = 'GA4CHANNEL_MAX_RETRIES'

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 2

# GA4 campaign URL parameters, in the order they are emitted
UTM_PARAMS = (
    'utm_source',
    'utm_medium',
    'utm_campaign',
    'utm_content',
    'utm_term',
    'utm_id',
)
GA4_PARAMS = (
    'utm_source_platform',
    'utm_creative_format',
    'utm_marketing_tactic',
)
REQUIRED_UTM_PARAMS = ('utm_source', 'utm_medium', 'utm_campaign')
