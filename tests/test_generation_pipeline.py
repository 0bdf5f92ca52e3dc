"""Bulk generation and regeneration at the service level"""
import pytest

from campaign_studio.core.errors import GenerationFailure, NotFound, ValidationFailure
from campaign_studio.models import Asset, AssetVersion, Audience
from campaign_studio.services.content_generator import ContentGenerator
from campaign_studio.services.generation_service import AssetGenerationService

from conftest import StubLLM


def service(db, llm, **kwargs):
    return AssetGenerationService(db, ContentGenerator(llm), **kwargs)


# ---------------------------------------------------------
# BULK GENERATE
# ---------------------------------------------------------
def test_one_asset_per_segment_and_channel(db, seed):
    campaign = seed()
    llm = StubLLM()

    assets = service(db, llm).generate_campaign_assets(campaign)

    assert [a.name for a in assets] == [
        "Students - Email",
        "Students - Meta Ad",
        "Parents - Email",
        "Parents - Meta Ad",
    ]
    assert [a.asset_type for a in assets] == ["hero_email", "single_image_ad"] * 2
    for asset in assets:
        assert [v.version_name for v in asset.versions] == ["Conversion Focus", "Awareness Focus"]
        assert [v.status for v in asset.versions] == ["generated", "generated"]
        assert asset.generation_prompt

    # one call per version, segment then channel then strategy
    assert len(llm.prompts) == 8
    assert "VERSION STRATEGY: conversion" in llm.prompts[0]
    assert "VERSION STRATEGY: awareness" in llm.prompts[1]
    assert "creating email content" in llm.prompts[0]
    assert "Meta (Facebook/Instagram)" in llm.prompts[2]
    assert "- Segment: Parents" in llm.prompts[4]

    assert campaign.status == "generated"
    assert db.query(Asset).count() == 4
    assert db.query(AssetVersion).count() == 8


def test_disabled_channel_is_skipped(db, seed):
    campaign = seed(channels=[{"type": "email"}, {"type": "meta_ads", "enabled": False}])
    assets = service(db, StubLLM()).generate_campaign_assets(campaign)
    assert [a.channel_type for a in assets] == ["email", "email"]


def test_single_version_failure_keeps_the_asset(db, seed):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}])
    assets = service(db, StubLLM(fail_calls={1})).generate_campaign_assets(campaign)

    assert len(assets) == 1
    assert [v.strategy for v in assets[0].versions] == ["awareness"]
    assert assets[0].versions[0].position == 0


def test_failed_asset_is_dropped_and_the_rest_continue(db, seed):
    campaign = seed(audience_names=("Students",))
    # both versions of the email asset fail
    assets = service(db, StubLLM(fail_calls={1, 2})).generate_campaign_assets(campaign)

    assert [a.channel_type for a in assets] == ["meta_ads"]
    assert db.query(Asset).count() == 1
    assert campaign.status == "generated"


def test_status_flips_even_when_nothing_was_generated(db, seed):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}])
    assets = service(db, StubLLM(fail_calls={1, 2})).generate_campaign_assets(campaign)

    assert assets == []
    assert db.query(Asset).count() == 0
    assert campaign.status == "generated"


def test_status_kept_when_assets_are_required(db, seed):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}])
    gen = service(db, StubLLM(fail_calls={1, 2}), generated_requires_assets=True)

    assert gen.generate_campaign_assets(campaign) == []
    assert campaign.status == "draft"


def test_deleted_audience_segment_is_skipped(db, seed):
    campaign = seed()
    db.query(Audience).filter(Audience.name == "Students").delete()
    db.commit()

    assets = service(db, StubLLM()).generate_campaign_assets(campaign)
    assert [a.name for a in assets] == ["Parents - Email", "Parents - Meta Ad"]


def test_segment_instructions_reach_the_prompt(db, seed):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}], segment_instructions="Mention finals week")
    llm = StubLLM()
    service(db, llm).generate_campaign_assets(campaign)
    assert all(p.endswith("ADDITIONAL INSTRUCTIONS:\nMention finals week") for p in llm.prompts)


def test_generating_twice_adds_new_assets(db, seed):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}])
    gen = service(db, StubLLM())
    gen.generate_campaign_assets(campaign)
    gen.generate_campaign_assets(campaign)
    assert db.query(Asset).count() == 2


@pytest.mark.parametrize(
    "segments, channels, message",
    [
        ([], [{"type": "email"}], "Campaign must have at least one segment"),
        (None, [{"type": "email", "enabled": False}], "Campaign must have at least one enabled channel"),
    ],
)
def test_preconditions(db, seed, segments, channels, message):
    campaign = seed(channels=channels)
    if segments is not None:
        campaign.segments = segments
        db.commit()

    llm = StubLLM()
    with pytest.raises(ValidationFailure) as exc:
        service(db, llm).generate_campaign_assets(campaign)
    assert exc.value.message == message
    assert llm.prompts == []


def test_missing_brand_guide(db, seed):
    campaign = seed()
    campaign.brand_guide_id = None
    db.commit()

    with pytest.raises(ValidationFailure) as exc:
        service(db, StubLLM()).generate_campaign_assets(campaign)
    assert exc.value.message == "Brand guide not found for this campaign"


# ---------------------------------------------------------
# REGENERATE
# ---------------------------------------------------------
def _one_asset(db, seed, llm=None):
    campaign = seed(audience_names=("Students",), channels=[{"type": "email"}])
    return service(db, llm or StubLLM()).generate_campaign_assets(campaign)[0]


def test_regenerate_appends_a_version(db, seed):
    asset = _one_asset(db, seed)
    revision = asset.revision

    service(db, StubLLM()).regenerate_asset(asset, strategy="urgency", instructions="Shorter")

    assert [v.version_name for v in asset.versions] == [
        "Conversion Focus",
        "Awareness Focus",
        "Urgency Focus (Regenerated)",
    ]
    assert asset.versions[-1].strategy == "urgency"
    assert asset.generation_prompt.endswith("ADDITIONAL INSTRUCTIONS:\nShorter")
    assert asset.revision == revision + 1


def test_regenerate_defaults_to_conversion(db, seed):
    asset = _one_asset(db, seed)
    service(db, StubLLM()).regenerate_asset(asset)
    assert asset.versions[-1].strategy == "conversion"
    assert asset.versions[-1].version_name == "Conversion Focus (Regenerated)"


def test_regenerate_caps_versions_dropping_the_oldest(db, seed):
    asset = _one_asset(db, seed)
    gen = service(db, StubLLM())

    gen.regenerate_asset(asset, strategy="urgency")
    gen.regenerate_asset(asset, strategy="emotional")

    assert [v.version_name for v in asset.versions] == [
        "Awareness Focus",
        "Urgency Focus (Regenerated)",
        "Emotional Focus (Regenerated)",
    ]
    assert [v.position for v in asset.versions] == [0, 1, 2]
    assert db.query(AssetVersion).count() == 3


def test_regenerate_single_version_asset(db, seed):
    asset = _one_asset(db, seed, llm=StubLLM(fail_calls={1}))
    assert len(asset.versions) == 1

    service(db, StubLLM()).regenerate_asset(asset)
    assert len(asset.versions) == 2


def test_regenerate_failure_leaves_asset_untouched(db, seed):
    asset = _one_asset(db, seed)
    with pytest.raises(GenerationFailure) as exc:
        service(db, StubLLM(fail_calls={1})).regenerate_asset(asset)

    assert exc.value.message == "Regeneration failed: Content generation failed: upstream unavailable"
    assert len(asset.versions) == 2


def test_regenerate_invalid_strategy(db, seed):
    asset = _one_asset(db, seed)
    with pytest.raises(ValidationFailure):
        service(db, StubLLM()).regenerate_asset(asset, strategy="sarcasm")


def test_regenerate_with_deleted_audience(db, seed):
    asset = _one_asset(db, seed)
    db.query(Audience).filter(Audience.id == asset.audience_id).delete()
    db.commit()

    with pytest.raises(NotFound) as exc:
        service(db, StubLLM()).regenerate_asset(asset)
    assert exc.value.message == "Audience not found"


def test_regenerate_version_in_place(db, seed):
    asset = _one_asset(db, seed)
    target = asset.versions[1]
    target.status = "approved"
    target.content = {**target.content, "headline": "Old headline"}
    db.commit()

    service(db, StubLLM()).regenerate_version(asset, target.id, instructions="More playful")

    assert len(asset.versions) == 2
    assert asset.versions[1].id == target.id
    assert asset.versions[1].status == "generated"
    assert asset.versions[1].content["headline"] != "Old headline"
    assert "VERSION STRATEGY: awareness" in asset.generation_prompt


def test_regenerate_unknown_version(db, seed):
    asset = _one_asset(db, seed)
    with pytest.raises(NotFound):
        service(db, StubLLM()).regenerate_version(asset, "does-not-exist")
