from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from datetime import datetime

from campaign_studio.core.constants import MAX_SEGMENTS_PER_CAMPAIGN, MAX_CHANNELS_PER_CAMPAIGN

CampaignStatus = Literal["draft", "generated", "approved", "archived"]
ChannelType = Literal["email", "meta_ads"]
UrgencyLevel = Literal["low", "medium", "high"]


# --- 1. SUB-DOCUMENTS ---
class CampaignSegment(BaseModel):
    audience_id: int
    custom_instructions: Optional[str] = Field(None, max_length=1000)


class CampaignChannel(BaseModel):
    type: ChannelType
    enabled: bool = True
    purpose: Optional[str] = Field(None, max_length=500)


# --- 2. CREATE / UPDATE ---
class CampaignCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    objective: Optional[str] = Field(None, max_length=1000)
    description: Optional[str] = Field(None, max_length=2000)
    segments: List[CampaignSegment] = Field(default_factory=list, max_length=MAX_SEGMENTS_PER_CAMPAIGN)
    channels: List[CampaignChannel] = Field(default_factory=list, max_length=MAX_CHANNELS_PER_CAMPAIGN)
    key_messages: List[str] = []
    call_to_action: Optional[str] = Field(None, max_length=100)
    urgency_level: UrgencyLevel = "medium"
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class CampaignUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    objective: Optional[str] = Field(None, max_length=1000)
    description: Optional[str] = Field(None, max_length=2000)
    status: Optional[CampaignStatus] = None
    segments: Optional[List[CampaignSegment]] = Field(None, max_length=MAX_SEGMENTS_PER_CAMPAIGN)
    channels: Optional[List[CampaignChannel]] = Field(None, max_length=MAX_CHANNELS_PER_CAMPAIGN)
    key_messages: Optional[List[str]] = None
    call_to_action: Optional[str] = Field(None, max_length=100)
    urgency_level: Optional[UrgencyLevel] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


# --- 3. RESPONSES ---
class CampaignContextSummary(BaseModel):
    name: str
    objective: Optional[str] = None
    key_messages: List[str] = []
    cta: Optional[str] = None
    urgency: Optional[str] = None
    segment_count: int
    channels: List[str] = []


class CampaignResponse(BaseModel):
    id: int
    brand_guide_id: Optional[int] = None
    name: str
    objective: Optional[str] = None
    description: Optional[str] = None
    status: str
    segments: List[CampaignSegment] = []
    channels: List[CampaignChannel] = []
    key_messages: List[str] = []
    call_to_action: Optional[str] = None
    urgency_level: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    expected_asset_count: int
    context_summary: CampaignContextSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CampaignStats(BaseModel):
    segment_count: int
    channel_count: int
    asset_count: int
    expected_asset_count: int
