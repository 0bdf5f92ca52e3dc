"""initial schema: users, brand guides, audiences, campaigns, assets

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("company", sa.String(200), nullable=True),
        sa.Column("created_at", sa.TIMESTAMP()),
        sa.Column("updated_at", sa.TIMESTAMP()),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "brand_guides",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("company_name", sa.String(100), nullable=False),
        sa.Column("industry", sa.String(100)),
        sa.Column("voice_attributes", sa.JSON()),
        sa.Column("tone_guidelines", sa.Text()),
        sa.Column("value_proposition", sa.Text()),
        sa.Column("key_messages", sa.JSON()),
        sa.Column("avoid_phrases", sa.JSON()),
        sa.Column("primary_colors", sa.JSON()),
        sa.Column("logo_url", sa.String(500)),
        sa.Column("target_audience", sa.Text()),
        sa.Column("competitor_context", sa.Text()),
        sa.Column("created_at", sa.TIMESTAMP()),
        sa.Column("updated_at", sa.TIMESTAMP()),
    )
    op.create_index("ix_brand_guides_id", "brand_guides", ["id"])
    op.create_index("ix_brand_guides_user_id", "brand_guides", ["user_id"], unique=True)

    op.create_table(
        "audiences",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("demographics", sa.JSON()),
        sa.Column("propensity_level", sa.String(10)),
        sa.Column("interests", sa.JSON()),
        sa.Column("pain_points", sa.JSON()),
        sa.Column("preferred_tone", sa.String(200)),
        sa.Column("key_motivators", sa.JSON()),
        sa.Column("estimated_size", sa.Integer()),
        sa.Column("is_active", sa.Boolean()),
        sa.Column("created_at", sa.TIMESTAMP()),
        sa.Column("updated_at", sa.TIMESTAMP()),
        sa.UniqueConstraint("user_id", "name", name="uq_audiences_user_name"),
    )
    op.create_index("ix_audiences_id", "audiences", ["id"])
    op.create_index("ix_audiences_user_id", "audiences", ["user_id"])

    op.create_table(
        "campaigns",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("brand_guide_id", sa.Integer(), sa.ForeignKey("brand_guides.id", ondelete="SET NULL"), nullable=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("objective", sa.Text()),
        sa.Column("description", sa.Text()),
        sa.Column("status", sa.String(20)),
        sa.Column("segments", sa.JSON()),
        sa.Column("channels", sa.JSON()),
        sa.Column("key_messages", sa.JSON()),
        sa.Column("call_to_action", sa.String(100)),
        sa.Column("urgency_level", sa.String(10)),
        sa.Column("start_date", sa.TIMESTAMP(), nullable=True),
        sa.Column("end_date", sa.TIMESTAMP(), nullable=True),
        sa.Column("created_at", sa.TIMESTAMP()),
        sa.Column("updated_at", sa.TIMESTAMP()),
    )
    op.create_index("ix_campaigns_id", "campaigns", ["id"])
    op.create_index("ix_campaigns_user_id", "campaigns", ["user_id"])
    op.create_index("ix_campaigns_status", "campaigns", ["status"])

    op.create_table(
        "assets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("campaign_id", sa.Integer(), sa.ForeignKey("campaigns.id", ondelete="CASCADE"), nullable=False),
        sa.Column("audience_id", sa.Integer(), sa.ForeignKey("audiences.id", ondelete="SET NULL"), nullable=True),
        sa.Column("channel_type", sa.String(20), nullable=False),
        sa.Column("asset_type", sa.String(40), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("generation_prompt", sa.Text()),
        sa.Column("revision", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP()),
        sa.Column("updated_at", sa.TIMESTAMP()),
    )
    op.create_index("ix_assets_id", "assets", ["id"])
    op.create_index("ix_assets_campaign_audience", "assets", ["campaign_id", "audience_id"])
    op.create_index("ix_assets_campaign_channel", "assets", ["campaign_id", "channel_type"])

    op.create_table(
        "asset_versions",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("asset_id", sa.Integer(), sa.ForeignKey("assets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("version_name", sa.String(100), nullable=False),
        sa.Column("strategy", sa.String(20)),
        sa.Column("content", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(20)),
        sa.Column("generated_at", sa.TIMESTAMP(), nullable=True),
        sa.Column("edited_at", sa.TIMESTAMP(), nullable=True),
    )
    op.create_index("ix_asset_versions_asset_id", "asset_versions", ["asset_id"])


def downgrade() -> None:
    op.drop_table("asset_versions")
    op.drop_table("assets")
    op.drop_table("campaigns")
    op.drop_table("audiences")
    op.drop_table("brand_guides")
    op.drop_table("users")
