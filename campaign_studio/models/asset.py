import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, JSON, Index
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from campaign_studio.core.database import Base


def _version_id() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------
# ASSETS (one per campaign x audience x channel)
# ---------------------------------------------------------
class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = (
        Index("ix_assets_campaign_audience", "campaign_id", "audience_id"),
        Index("ix_assets_campaign_channel", "campaign_id", "channel_type"),
    )

    id = Column(Integer, primary_key=True, index=True)

    campaign_id = Column(Integer, ForeignKey("campaigns.id", ondelete="CASCADE"), nullable=False)
    audience_id = Column(Integer, ForeignKey("audiences.id", ondelete="SET NULL"), nullable=True)

    channel_type = Column(String(20), nullable=False)   # 'email', 'meta_ads'
    asset_type = Column(String(40), nullable=False)     # 'hero_email', 'single_image_ad'
    name = Column(String(200), nullable=False)

    # Last prompt sent for this asset (kept for regeneration / audit)
    generation_prompt = Column(Text)

    # Optimistic concurrency counter, bumped on every write of this row
    revision = Column(Integer, nullable=False, default=1)

    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow)

    # Relationships
    campaign = relationship("Campaign", back_populates="assets")
    audience = relationship("Audience")
    versions = relationship(
        "AssetVersion",
        back_populates="asset",
        order_by="AssetVersion.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": revision}

    def touch(self):
        """Marks the row dirty so version-list changes also bump `revision`."""
        self.updated_at = datetime.utcnow()

    @property
    def is_fully_approved(self) -> bool:
        return len(self.versions) > 0 and all(v.status == "approved" for v in self.versions)

    @property
    def latest_version(self):
        return self.versions[-1] if self.versions else None

    def find_version(self, version_id: str):
        for version in self.versions:
            if version.id == version_id:
                return version
        return None


# ---------------------------------------------------------
# ASSET VERSIONS (strategy-flavoured content candidates)
# ---------------------------------------------------------
class AssetVersion(Base):
    __tablename__ = "asset_versions"

    id = Column(String(32), primary_key=True, default=_version_id)
    asset_id = Column(Integer, ForeignKey("assets.id", ondelete="CASCADE"), index=True, nullable=False)

    # Insertion order within the asset; maintained by ordering_list
    position = Column(Integer, nullable=False, default=0)

    version_name = Column(String(100), nullable=False)
    strategy = Column(String(20))  # 'conversion', 'awareness', 'urgency', 'emotional'

    # EmailContent or MetaAdContent, shape decided by Asset.channel_type
    content = Column(JSON, nullable=False)

    # Status Flow: 'pending' -> 'generated' -> 'edited' / 'approved'
    status = Column(String(20), default="pending")

    generated_at = Column(TIMESTAMP, nullable=True)
    edited_at = Column(TIMESTAMP, nullable=True)

    asset = relationship("Asset", back_populates="versions")
