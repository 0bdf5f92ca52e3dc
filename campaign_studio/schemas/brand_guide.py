import re
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from campaign_studio.core.constants import MAX_COLORS_PER_BRAND_GUIDE

HEX_COLOR = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


class _BrandGuideFields(BaseModel):
    industry: Optional[str] = Field(None, max_length=100)
    voice_attributes: Optional[List[str]] = None
    tone_guidelines: Optional[str] = Field(None, max_length=1000)
    value_proposition: Optional[str] = Field(None, max_length=1000)
    key_messages: Optional[List[str]] = None
    avoid_phrases: Optional[List[str]] = None
    primary_colors: Optional[List[str]] = Field(None, max_length=MAX_COLORS_PER_BRAND_GUIDE)
    logo_url: Optional[str] = Field(None, max_length=500)
    target_audience: Optional[str] = Field(None, max_length=1000)
    competitor_context: Optional[str] = Field(None, max_length=1000)

    @field_validator("primary_colors")
    @classmethod
    def check_hex_colors(cls, colors):
        for color in colors or []:
            if not HEX_COLOR.match(color):
                raise ValueError(f"Invalid hex color: {color}")
        return colors


class BrandGuideCreate(_BrandGuideFields):
    company_name: str = Field(min_length=1, max_length=100)


class BrandGuideUpdate(_BrandGuideFields):
    company_name: Optional[str] = Field(None, min_length=1, max_length=100)


class BrandGuideResponse(BaseModel):
    id: int
    company_name: str
    industry: Optional[str] = None
    voice_attributes: List[str] = []
    tone_guidelines: Optional[str] = None
    value_proposition: Optional[str] = None
    key_messages: List[str] = []
    avoid_phrases: List[str] = []
    primary_colors: List[str] = []
    logo_url: Optional[str] = None
    target_audience: Optional[str] = None
    competitor_context: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
