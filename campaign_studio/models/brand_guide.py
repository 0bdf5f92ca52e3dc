from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, JSON
from campaign_studio.core.database import Base


def _join(values, fallback: str = "Not specified") -> str:
    return ", ".join(v for v in (values or []) if v) or fallback


class BrandGuide(Base):
    __tablename__ = "brand_guides"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    # Identity
    company_name = Column(String(100), nullable=False)
    industry = Column(String(100))

    # Voice
    voice_attributes = Column(JSON, default=list)   # e.g. ["bold", "warm", "witty"]
    tone_guidelines = Column(Text)
    value_proposition = Column(Text)
    key_messages = Column(JSON, default=list)
    avoid_phrases = Column(JSON, default=list)

    # Visual
    primary_colors = Column(JSON, default=list)     # hex codes
    logo_url = Column(String(500))

    # Market
    target_audience = Column(Text)
    competitor_context = Column(Text)

    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def prompt_context(self) -> dict:
        """Flattened brand fields as they are quoted in generation prompts."""
        return {
            "company_name": self.company_name,
            "industry": self.industry or "Not specified",
            "voice": _join(self.voice_attributes, "Professional, friendly"),
            "tone_guidelines": self.tone_guidelines or "Not specified",
            "value_proposition": self.value_proposition or "Not specified",
            "key_messages": _join(self.key_messages),
            "avoid_phrases": _join(self.avoid_phrases, "None"),
            "colors": _join(self.primary_colors),
            "target_audience": self.target_audience or "Not specified",
            "competitor_context": self.competitor_context or "Not specified",
        }
