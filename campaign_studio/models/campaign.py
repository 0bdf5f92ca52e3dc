from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from campaign_studio.core.database import Base


# ---------------------------------------------------------
# CAMPAIGNS (The Generation Scope)
# ---------------------------------------------------------
class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    # Set once at creation from the owner's current guide
    brand_guide_id = Column(Integer, ForeignKey("brand_guides.id", ondelete="SET NULL"), nullable=True)

    name = Column(String(200), nullable=False)
    objective = Column(Text)
    description = Column(Text)
    status = Column(String(20), default="draft", index=True)  # 'draft', 'generated', 'approved', 'archived'

    # Targeting: [{"audience_id": 1, "custom_instructions": "..."}]
    segments = Column(JSON, default=list)

    # Channels: [{"type": "email", "enabled": true, "purpose": "..."}]
    channels = Column(JSON, default=list)

    # Messaging parameters
    key_messages = Column(JSON, default=list)
    call_to_action = Column(String(100))
    urgency_level = Column(String(10), default="medium")  # 'low', 'medium', 'high'

    start_date = Column(TIMESTAMP, nullable=True)
    end_date = Column(TIMESTAMP, nullable=True)

    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    brand_guide = relationship("BrandGuide")
    assets = relationship(
        "Asset",
        back_populates="campaign",
        cascade="all, delete-orphan",
        order_by="Asset.id",
    )

    @property
    def enabled_channels(self) -> list:
        return [c for c in (self.channels or []) if c.get("enabled", True)]

    @property
    def expected_asset_count(self) -> int:
        return len(self.segments or []) * len(self.enabled_channels)

    @property
    def context_summary(self) -> dict:
        return {
            "name": self.name,
            "objective": self.objective,
            "key_messages": list(self.key_messages or []),
            "cta": self.call_to_action,
            "urgency": self.urgency_level,
            "segment_count": len(self.segments or []),
            "channels": [c["type"] for c in self.enabled_channels],
        }
