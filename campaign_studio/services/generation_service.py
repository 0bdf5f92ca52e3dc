"""
Asset generation pipeline.

Expands a campaign into one asset per (segment x enabled channel), each with
one version per default strategy, and regenerates single assets on demand.

Calls to the text-generation capability are made one at a time, in segment
then channel then strategy order. Every asset is committed on its own as soon
as it is complete, and the campaign status is committed last; a crash part
way through therefore leaves some assets saved and the campaign still in its
previous status.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from campaign_studio.core.config import settings
from campaign_studio.core.constants import (
    ASSET_TYPE_BY_CHANNEL,
    CAMPAIGN_GENERATED,
    CHANNEL_LABELS,
    DEFAULT_STRATEGIES,
    MAX_VERSIONS_PER_ASSET,
    STRATEGIES,
    STRATEGY_CONVERSION,
    VERSION_GENERATED,
)
from campaign_studio.core.errors import GenerationFailure, NotFound, ValidationFailure
from campaign_studio.models.asset import Asset, AssetVersion
from campaign_studio.models.brand_guide import BrandGuide
from campaign_studio.models.campaign import Campaign
from campaign_studio.services.asset_service import commit_asset
from campaign_studio.services.audience_service import AudienceService
from campaign_studio.services.content_generator import ContentGenerator
from campaign_studio.services.prompt_builder import strategy_label

logger = logging.getLogger(__name__)


class AssetGenerationService:
    def __init__(self, db: Session, generator: ContentGenerator, generated_requires_assets: bool = None):
        self.db = db
        self.generator = generator
        if generated_requires_assets is None:
            generated_requires_assets = settings.GENERATED_REQUIRES_ASSETS
        self.generated_requires_assets = generated_requires_assets

    # ---------------------------------------------------------
    # CONTEXT RESOLUTION
    # ---------------------------------------------------------
    def _brand_guide_for(self, campaign: Campaign) -> Optional[BrandGuide]:
        if campaign.brand_guide_id is None:
            return None
        return self.db.query(BrandGuide).filter(
            BrandGuide.id == campaign.brand_guide_id,
            BrandGuide.user_id == campaign.user_id,
        ).first()

    @staticmethod
    def _channel_purpose(campaign: Campaign, channel_type: str) -> Optional[str]:
        for channel in campaign.channels or []:
            if channel.get("type") == channel_type:
                return channel.get("purpose")
        return None

    @staticmethod
    def _new_version(strategy: str, content, name: str) -> AssetVersion:
        return AssetVersion(
            version_name=name,
            strategy=strategy,
            content=content.model_dump(),
            status=VERSION_GENERATED,
            generated_at=datetime.utcnow(),
        )

    # ---------------------------------------------------------
    # 1. BULK GENERATE
    # ---------------------------------------------------------
    def generate_campaign_assets(self, campaign: Campaign) -> List[Asset]:
        segments = list(campaign.segments or [])
        channels = campaign.enabled_channels

        if not segments:
            raise ValidationFailure("Campaign must have at least one segment")
        if not channels:
            raise ValidationFailure("Campaign must have at least one enabled channel")

        brand_guide = self._brand_guide_for(campaign)
        if not brand_guide:
            raise ValidationFailure("Brand guide not found for this campaign")

        audiences = AudienceService(self.db, campaign.user_id)
        persisted = []
        failures = 0

        logger.info(
            f"🤖 Generating assets for campaign {campaign.id}: "
            f"{len(segments)} segment(s) x {len(channels)} channel(s)"
        )

        for segment in segments:
            audience = audiences.find(segment.get("audience_id"))
            if not audience:
                logger.info(f"Skipping segment: audience {segment.get('audience_id')} no longer exists")
                continue

            for channel in channels:
                channel_type = channel["type"]
                asset = Asset(
                    campaign_id=campaign.id,
                    audience_id=audience.id,
                    channel_type=channel_type,
                    asset_type=ASSET_TYPE_BY_CHANNEL[channel_type],
                    name=f"{audience.name} - {CHANNEL_LABELS[channel_type]}",
                )

                for strategy in DEFAULT_STRATEGIES:
                    try:
                        generated = self.generator.generate(
                            brand_guide, campaign, audience, channel_type, strategy,
                            instructions=segment.get("custom_instructions"),
                            channel_purpose=channel.get("purpose"),
                        )
                    except GenerationFailure as e:
                        failures += 1
                        logger.warning(f"❌ Failed to generate {strategy} version for {asset.name}: {e.message}")
                        continue

                    asset.versions.append(self._new_version(strategy, generated.content, strategy_label(strategy)))
                    asset.generation_prompt = generated.prompt

                if not asset.versions:
                    continue

                self.db.add(asset)
                self.db.commit()
                self.db.refresh(asset)
                persisted.append(asset)
                logger.info(f"✅ Saved asset {asset.id} ({asset.name}) with {len(asset.versions)} version(s)")

        if persisted or not self.generated_requires_assets:
            campaign.status = CAMPAIGN_GENERATED
            self.db.commit()
            self.db.refresh(campaign)

        logger.info(
            f"🏁 Campaign {campaign.id}: {len(persisted)}/{campaign.expected_asset_count} assets generated, "
            f"{failures} version(s) failed"
        )
        return persisted

    # ---------------------------------------------------------
    # 2. REGENERATE ONE ASSET (adds a version)
    # ---------------------------------------------------------
    def _resolve(self, asset: Asset):
        campaign = asset.campaign
        if not campaign:
            raise NotFound("Campaign not found")

        brand_guide = self._brand_guide_for(campaign)
        if not brand_guide:
            raise NotFound("Brand guide not found")

        audience = AudienceService(self.db, campaign.user_id).find(asset.audience_id)
        if not audience:
            raise NotFound("Audience not found")

        return campaign, brand_guide, audience

    def _generate_for(self, asset: Asset, strategy: str, instructions: Optional[str]):
        campaign, brand_guide, audience = self._resolve(asset)
        try:
            return self.generator.generate(
                brand_guide, campaign, audience, asset.channel_type, strategy,
                instructions=instructions,
                channel_purpose=self._channel_purpose(campaign, asset.channel_type),
            )
        except GenerationFailure as e:
            raise GenerationFailure(f"Regeneration failed: {e.message}") from e

    def regenerate_asset(self, asset: Asset, instructions: Optional[str] = None, strategy: Optional[str] = None) -> Asset:
        strategy = strategy or STRATEGY_CONVERSION
        if strategy not in STRATEGIES:
            raise ValidationFailure(f"Strategy must be one of: {', '.join(STRATEGIES)}")

        generated = self._generate_for(asset, strategy, instructions)

        asset.versions.append(
            self._new_version(strategy, generated.content, f"{strategy_label(strategy)} (Regenerated)")
        )
        # Keep the most recent versions only, oldest go first
        while len(asset.versions) > MAX_VERSIONS_PER_ASSET:
            asset.versions.pop(0)

        asset.generation_prompt = generated.prompt
        commit_asset(self.db, asset)

        logger.info(f"♻️ Regenerated asset {asset.id} ({strategy}), {len(asset.versions)} version(s) kept")
        return asset

    # ---------------------------------------------------------
    # 3. REGENERATE ONE VERSION IN PLACE
    # ---------------------------------------------------------
    def regenerate_version(self, asset: Asset, version_id: str, instructions: Optional[str] = None) -> Asset:
        version = asset.find_version(version_id)
        if not version:
            raise NotFound("Version not found")

        strategy = version.strategy if version.strategy in STRATEGIES else STRATEGY_CONVERSION
        generated = self._generate_for(asset, strategy, instructions)

        version.content = generated.content.model_dump()
        version.status = VERSION_GENERATED
        version.generated_at = datetime.utcnow()

        asset.generation_prompt = generated.prompt
        commit_asset(self.db, asset)
        return asset
