from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP, ForeignKey, JSON, UniqueConstraint
from campaign_studio.core.database import Base


class Audience(Base):
    __tablename__ = "audiences"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_audiences_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    name = Column(String(100), nullable=False)
    description = Column(Text)

    # {"age_range": {"min": 25, "max": 40}, "income": "...", "location": [...], "other": "..."}
    demographics = Column(JSON, default=dict)

    # Behavioral
    propensity_level = Column(String(10), default="Medium")  # 'High', 'Medium', 'Low'
    interests = Column(JSON, default=list)
    pain_points = Column(JSON, default=list)

    # Messaging preferences
    preferred_tone = Column(String(200))
    key_motivators = Column(JSON, default=list)

    estimated_size = Column(Integer)
    is_active = Column(Boolean, default=True)

    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def summary(self) -> dict:
        """
        Human-readable projection used by prompt construction.
        Recomputed on every read, never stored.
        """
        demo = self.demographics or {}
        age_range = demo.get("age_range") or {}
        age_str = ""
        if age_range.get("min") or age_range.get("max"):
            age_str = f"Ages {age_range.get('min') or '?'}-{age_range.get('max') or '?'}"

        parts = [age_str, demo.get("income"), ", ".join(demo.get("location") or [])]

        return {
            "name": self.name,
            "description": self.description,
            "demographics": ", ".join(p for p in parts if p),
            "propensity": self.propensity_level,
            "interests": ", ".join(self.interests or []),
            "pain_points": ", ".join(self.pain_points or []),
            "motivators": ", ".join(self.key_motivators or []),
            "tone": self.preferred_tone,
        }
