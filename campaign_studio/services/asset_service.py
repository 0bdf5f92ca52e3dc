import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from campaign_studio.core.constants import VERSION_APPROVED, VERSION_EDITED
from campaign_studio.core.errors import Conflict, NotFound, ValidationFailure
from campaign_studio.models.asset import Asset, AssetVersion
from campaign_studio.models.campaign import Campaign
from campaign_studio.schemas.asset import AssetUpdate, VersionUpdate
from campaign_studio.schemas.content import merge_content
from campaign_studio.services.campaign_service import CampaignService

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Asset was modified by another request, reload it and try again"


def commit_asset(db: Session, asset: Asset):
    """Commits pending asset changes; a concurrent write in between is a Conflict."""
    asset.touch()
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning(f"Concurrent modification detected on asset {asset.id}")
        raise Conflict(CONFLICT_MESSAGE)
    db.refresh(asset)


class AssetService:
    """Manual asset edits. Assets are owned through their campaign."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    # ---------------------------------------------------------
    # 1. READ
    # ---------------------------------------------------------
    def get(self, asset_id: int) -> Asset:
        asset = (
            self.db.query(Asset)
            .join(Campaign, Asset.campaign_id == Campaign.id)
            .filter(Asset.id == asset_id, Campaign.user_id == self.user_id)
            .first()
        )
        if not asset:
            raise NotFound("Asset not found")
        return asset

    def list_for_campaign(self, campaign_id: int, channel_type: Optional[str] = None, audience_id: Optional[int] = None):
        campaign = CampaignService(self.db, self.user_id).get(campaign_id)

        query = self.db.query(Asset).filter(Asset.campaign_id == campaign.id)
        if channel_type:
            query = query.filter(Asset.channel_type == channel_type)
        if audience_id:
            query = query.filter(Asset.audience_id == audience_id)
        return query.order_by(Asset.channel_type, Asset.id).all()

    # ---------------------------------------------------------
    # 2. EDITS
    # ---------------------------------------------------------
    @staticmethod
    def check_revision(asset: Asset, expected: Optional[int]):
        if expected is not None and expected != asset.revision:
            raise Conflict(CONFLICT_MESSAGE)

    def _get_version(self, asset: Asset, version_id: str) -> AssetVersion:
        version = asset.find_version(version_id)
        if not version:
            raise NotFound("Version not found")
        return version

    def _apply_edit(self, asset: Asset, version: AssetVersion, version_name=None, content=None, status=None):
        if content:
            try:
                version.content = merge_content(asset.channel_type, version.content, content)
            except ValueError as e:
                raise ValidationFailure(f"Invalid content: {e}")
        if version_name:
            version.version_name = version_name

        version.edited_at = datetime.utcnow()
        # Any manual edit marks the version edited unless told otherwise
        version.status = status or VERSION_EDITED

    def update(self, asset_id: int, data: AssetUpdate) -> Asset:
        asset = self.get(asset_id)
        self.check_revision(asset, data.revision)

        if data.name:
            asset.name = data.name

        for edit in data.versions or []:
            version = None
            if edit.id:
                version = asset.find_version(edit.id)
            if version is None and edit.version_name:
                version = next((v for v in asset.versions if v.version_name == edit.version_name), None)
            if version is None:
                continue
            self._apply_edit(asset, version, edit.version_name, edit.content, edit.status)

        commit_asset(self.db, asset)
        return asset

    def update_version(self, asset_id: int, version_id: str, data: VersionUpdate) -> Asset:
        asset = self.get(asset_id)
        self.check_revision(asset, data.revision)

        version = self._get_version(asset, version_id)
        self._apply_edit(asset, version, data.version_name, data.content, data.status)

        commit_asset(self.db, asset)
        return asset

    def approve_version(self, asset_id: int, version_id: str) -> Asset:
        asset = self.get(asset_id)
        version = self._get_version(asset, version_id)
        version.status = VERSION_APPROVED

        commit_asset(self.db, asset)
        return asset

    def delete(self, asset_id: int):
        asset = self.get(asset_id)
        self.db.delete(asset)
        self.db.commit()
