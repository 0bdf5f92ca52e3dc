from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from datetime import datetime

Strategy = Literal["conversion", "awareness", "urgency", "emotional"]
VersionStatus = Literal["pending", "generated", "edited", "approved"]


# --- 1. RESPONSES ---
class AssetVersionResponse(BaseModel):
    id: str
    version_name: str
    strategy: Optional[str] = None
    content: dict
    status: str
    generated_at: Optional[datetime] = None
    edited_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AssetResponse(BaseModel):
    id: int
    campaign_id: int
    audience_id: Optional[int] = None
    channel_type: str
    asset_type: str
    name: str
    generation_prompt: Optional[str] = None
    revision: int
    versions: List[AssetVersionResponse] = []
    is_fully_approved: bool
    latest_version: Optional[AssetVersionResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# --- 2. EDITS ---
class VersionEdit(BaseModel):
    """One entry of PUT /assets/{id} `versions`; matched by id, then by version_name."""
    id: Optional[str] = None
    version_name: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[dict] = None
    status: Optional[VersionStatus] = None


class AssetUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    versions: Optional[List[VersionEdit]] = None
    revision: Optional[int] = None


class VersionUpdate(BaseModel):
    version_name: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[dict] = None
    status: Optional[VersionStatus] = None
    revision: Optional[int] = None


# --- 3. REGENERATION ---
class RegenerateRequest(BaseModel):
    instructions: Optional[str] = Field(None, max_length=1000)
    strategy: Optional[Strategy] = None


class RegenerateVersionRequest(BaseModel):
    instructions: Optional[str] = Field(None, max_length=1000)
