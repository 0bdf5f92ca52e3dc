"""
Typed content shapes for asset versions.

The text-generation endpoint is asked for camelCase JSON keys, so both models
accept camelCase aliases as well as their snake_case field names. Content is
always stored and returned in snake_case.
"""
from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from campaign_studio.core.constants import CHANNEL_EMAIL, CHANNEL_META_ADS


class _ContentBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class EmailContent(_ContentBase):
    subject_line: str
    preheader: str
    headline: str
    body_copy: str
    cta_text: str


class MetaAdContent(_ContentBase):
    primary_text: str
    headline: str
    description: str
    cta_button: str


Content = Union[EmailContent, MetaAdContent]

CONTENT_MODELS = {
    CHANNEL_EMAIL: EmailContent,
    CHANNEL_META_ADS: MetaAdContent,
}


def parse_content(channel_type: str, data: dict) -> Content:
    """Validates `data` against the shape for `channel_type` (raises pydantic.ValidationError)."""
    return CONTENT_MODELS[channel_type].model_validate(data)


def merge_content(channel_type: str, existing: dict, patch: dict) -> dict:
    """
    Applies a partial edit (snake_case or camelCase keys) on top of stored
    content and returns the validated snake_case result.
    Raises ValueError on keys that do not belong to the channel's shape.
    """
    model = CONTENT_MODELS[channel_type]
    names = {}
    for name, field in model.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name

    unknown = [key for key in patch if key not in names]
    if unknown:
        raise ValueError(f"Unknown content fields for {channel_type}: {', '.join(unknown)}")

    merged = dict(existing or {})
    for key, value in patch.items():
        merged[names[key]] = value
    return model.model_validate(merged).model_dump()
