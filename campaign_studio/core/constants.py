"""Application-wide limits and enumerations."""

# ---------------------------------------------------------
# LIMITS
# ---------------------------------------------------------
MAX_AUDIENCES_PER_USER = 5
MAX_CAMPAIGNS_PER_USER = 10
MAX_SEGMENTS_PER_CAMPAIGN = 5
MAX_CHANNELS_PER_CAMPAIGN = 2
MAX_VERSIONS_PER_ASSET = 3
MAX_COLORS_PER_BRAND_GUIDE = 6
PASSWORD_MIN_LENGTH = 8

# ---------------------------------------------------------
# CAMPAIGN STATUS  draft -> generated -> approved / archived
# ---------------------------------------------------------
CAMPAIGN_DRAFT = "draft"
CAMPAIGN_GENERATED = "generated"
CAMPAIGN_APPROVED = "approved"
CAMPAIGN_ARCHIVED = "archived"
CAMPAIGN_STATUSES = (CAMPAIGN_DRAFT, CAMPAIGN_GENERATED, CAMPAIGN_APPROVED, CAMPAIGN_ARCHIVED)

# ---------------------------------------------------------
# VERSION STATUS  pending -> generated -> edited / approved
# ---------------------------------------------------------
VERSION_PENDING = "pending"
VERSION_GENERATED = "generated"
VERSION_EDITED = "edited"
VERSION_APPROVED = "approved"
VERSION_STATUSES = (VERSION_PENDING, VERSION_GENERATED, VERSION_EDITED, VERSION_APPROVED)

# ---------------------------------------------------------
# CHANNELS & ASSET TYPES
# ---------------------------------------------------------
CHANNEL_EMAIL = "email"
CHANNEL_META_ADS = "meta_ads"
CHANNEL_TYPES = (CHANNEL_EMAIL, CHANNEL_META_ADS)

ASSET_TYPE_BY_CHANNEL = {
    CHANNEL_EMAIL: "hero_email",
    CHANNEL_META_ADS: "single_image_ad",
}

CHANNEL_LABELS = {
    CHANNEL_EMAIL: "Email",
    CHANNEL_META_ADS: "Meta Ad",
}

# ---------------------------------------------------------
# STRATEGIES
# ---------------------------------------------------------
STRATEGY_CONVERSION = "conversion"
STRATEGY_AWARENESS = "awareness"
STRATEGY_URGENCY = "urgency"
STRATEGY_EMOTIONAL = "emotional"
STRATEGIES = (STRATEGY_CONVERSION, STRATEGY_AWARENESS, STRATEGY_URGENCY, STRATEGY_EMOTIONAL)

# Versions produced for every asset on bulk generation, in this order
DEFAULT_STRATEGIES = (STRATEGY_CONVERSION, STRATEGY_AWARENESS)

# ---------------------------------------------------------
# AUDIENCE / CAMPAIGN ENUMS
# ---------------------------------------------------------
PROPENSITY_LEVELS = ("High", "Medium", "Low")
URGENCY_LEVELS = ("low", "medium", "high")

META_CTA_BUTTONS = (
    "Shop Now", "Learn More", "Sign Up", "Book Now", "Contact Us",
    "Get Offer", "Get Quote", "Subscribe", "Apply Now", "Download",
)
