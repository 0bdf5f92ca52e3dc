from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from campaign_studio.core.constants import MAX_CAMPAIGNS_PER_USER, CAMPAIGN_DRAFT
from campaign_studio.core.errors import NotFound, ValidationFailure
from campaign_studio.models.asset import Asset
from campaign_studio.models.audience import Audience
from campaign_studio.models.campaign import Campaign
from campaign_studio.schemas.campaign import CampaignCreate, CampaignUpdate
from campaign_studio.services.audience_service import AudienceService
from campaign_studio.services.brand_guide_service import BrandGuideService

# Fields copied onto a duplicate; status and timestamps start fresh
COPIED_FIELDS = (
    "brand_guide_id", "objective", "description", "segments", "channels",
    "key_messages", "call_to_action", "urgency_level", "start_date", "end_date",
)


def _check_dates(start_date, end_date):
    if start_date and end_date and start_date > end_date:
        raise ValidationFailure("Start date must be before end date")


class CampaignService:
    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _owned(self):
        return self.db.query(Campaign).filter(Campaign.user_id == self.user_id)

    def _check_quota(self):
        if self._owned().count() >= MAX_CAMPAIGNS_PER_USER:
            raise ValidationFailure(f"Maximum {MAX_CAMPAIGNS_PER_USER} campaigns allowed per user")

    # ---------------------------------------------------------
    # 1. READ
    # ---------------------------------------------------------
    def list(self, status: Optional[str] = None, page: int = 1, limit: int = 10):
        query = self._owned()
        if status:
            query = query.filter(Campaign.status == status)

        total = query.count()
        campaigns = (
            query.order_by(Campaign.created_at.desc(), Campaign.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return campaigns, total

    def get(self, campaign_id: int) -> Campaign:
        campaign = self._owned().filter(Campaign.id == campaign_id).first()
        if not campaign:
            raise NotFound("Campaign not found")
        return campaign

    def get_stats(self, campaign: Campaign) -> dict:
        return {
            "segment_count": len(campaign.segments or []),
            "channel_count": len(campaign.enabled_channels),
            "asset_count": len(campaign.assets),
            "expected_asset_count": campaign.expected_asset_count,
        }

    # ---------------------------------------------------------
    # 2. WRITE
    # ---------------------------------------------------------
    def create(self, data: CampaignCreate) -> Campaign:
        self._check_quota()

        brand_guide = BrandGuideService(self.db, self.user_id).get_current()
        if not brand_guide:
            raise ValidationFailure("Please create a brand guide before creating campaigns")

        AudienceService(self.db, self.user_id).ensure_owned(s.audience_id for s in data.segments)
        _check_dates(data.start_date, data.end_date)

        campaign = Campaign(
            user_id=self.user_id,
            brand_guide_id=brand_guide.id,
            status=CAMPAIGN_DRAFT,
            **data.model_dump(),
        )
        self.db.add(campaign)
        self.db.commit()
        self.db.refresh(campaign)
        return campaign

    def update(self, campaign_id: int, data: CampaignUpdate) -> Campaign:
        campaign = self.get(campaign_id)
        changes = data.model_dump(exclude_unset=True)

        if changes.get("segments"):
            AudienceService(self.db, self.user_id).ensure_owned(s["audience_id"] for s in changes["segments"])

        _check_dates(
            changes.get("start_date", campaign.start_date),
            changes.get("end_date", campaign.end_date),
        )

        for field, value in changes.items():
            if value is None and field in ("name", "status", "urgency_level", "segments", "channels", "key_messages"):
                continue
            setattr(campaign, field, value)

        self.db.commit()
        self.db.refresh(campaign)
        return campaign

    def delete(self, campaign_id: int):
        # Assets go with it (relationship cascade)
        campaign = self.get(campaign_id)
        self.db.delete(campaign)
        self.db.commit()

    def duplicate(self, campaign_id: int) -> Campaign:
        original = self.get(campaign_id)
        self._check_quota()

        copy = Campaign(
            user_id=self.user_id,
            name=f"{original.name} (Copy)",
            status=CAMPAIGN_DRAFT,
            **{field: getattr(original, field) for field in COPIED_FIELDS},
        )
        self.db.add(copy)
        self.db.commit()
        self.db.refresh(copy)
        return copy

    # ---------------------------------------------------------
    # 3. EXPORT
    # ---------------------------------------------------------
    def export_campaign(self, campaign_id: int) -> dict:
        campaign = self.get(campaign_id)

        audience_ids = [s.get("audience_id") for s in campaign.segments or []]
        names = {}
        if audience_ids:
            rows = self.db.query(Audience.id, Audience.name).filter(
                Audience.id.in_(audience_ids),
                Audience.user_id == self.user_id,
            ).all()
            names = {r.id: r.name for r in rows}

        assets = (
            self.db.query(Asset)
            .filter(Asset.campaign_id == campaign.id)
            .order_by(Asset.id)
            .all()
        )

        return {
            "exported_at": datetime.utcnow().isoformat(),
            "campaign": {
                "name": campaign.name,
                "objective": campaign.objective,
                "description": campaign.description,
                "status": campaign.status,
                "key_messages": campaign.key_messages or [],
                "call_to_action": campaign.call_to_action,
                "urgency_level": campaign.urgency_level,
                "start_date": campaign.start_date,
                "end_date": campaign.end_date,
            },
            "segments": [
                {
                    "audience_name": names.get(seg.get("audience_id")),
                    "custom_instructions": seg.get("custom_instructions"),
                }
                for seg in campaign.segments or []
            ],
            "channels": campaign.channels or [],
            "assets": [
                {
                    "name": asset.name,
                    "channel_type": asset.channel_type,
                    "asset_type": asset.asset_type,
                    "versions": [
                        {
                            "version_name": v.version_name,
                            "strategy": v.strategy,
                            "content": v.content,
                            "status": v.status,
                        }
                        for v in asset.versions
                    ],
                }
                for asset in assets
            ],
        }
