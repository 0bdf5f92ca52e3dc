from .user import User
from .brand_guide import BrandGuide
from .audience import Audience
from .campaign import Campaign
from .asset import Asset, AssetVersion

__all__ = [
    "User",
    "BrandGuide",
    "Audience",
    "Campaign",
    "Asset",
    "AssetVersion",
]
