from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from datetime import datetime

PropensityLevel = Literal["High", "Medium", "Low"]


class AgeRange(BaseModel):
    min: Optional[int] = Field(None, ge=0, le=120)
    max: Optional[int] = Field(None, ge=0, le=120)


class Demographics(BaseModel):
    age_range: Optional[AgeRange] = None
    income: Optional[str] = Field(None, max_length=100)
    location: List[str] = []
    other: Optional[str] = Field(None, max_length=500)


class AudienceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    demographics: Demographics = Field(default_factory=Demographics)
    propensity_level: PropensityLevel = "Medium"
    interests: List[str] = []
    pain_points: List[str] = []
    preferred_tone: Optional[str] = Field(None, max_length=200)
    key_motivators: List[str] = []
    estimated_size: Optional[int] = Field(None, ge=0)
    is_active: bool = True


class AudienceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    demographics: Optional[Demographics] = None
    propensity_level: Optional[PropensityLevel] = None
    interests: Optional[List[str]] = None
    pain_points: Optional[List[str]] = None
    preferred_tone: Optional[str] = Field(None, max_length=200)
    key_motivators: Optional[List[str]] = None
    estimated_size: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class AudienceSummary(BaseModel):
    name: str
    description: Optional[str] = None
    demographics: str
    propensity: Optional[str] = None
    interests: str
    pain_points: str
    motivators: str
    tone: Optional[str] = None


class AudienceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    demographics: dict = {}
    propensity_level: str
    interests: List[str] = []
    pain_points: List[str] = []
    preferred_tone: Optional[str] = None
    key_motivators: List[str] = []
    estimated_size: Optional[int] = None
    is_active: bool
    summary: AudienceSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
