"""
Channel- and strategy-specific prompt templates for marketing copy.

Length limits are stated to the model but not enforced on its reply.
"""
from typing import Optional

from campaign_studio.core.constants import CHANNEL_EMAIL, CHANNEL_META_ADS, META_CTA_BUTTONS
from campaign_studio.core.errors import ValidationFailure

EMAIL_DIRECTIVES = {
    "conversion": "Focus on driving immediate action with clear benefits and a strong CTA",
    "awareness": "Focus on brand storytelling and education",
    "urgency": "Emphasize limited time, scarcity, or deadlines",
    "emotional": "Connect through values, lifestyle, and emotional resonance",
}

META_AD_DIRECTIVES = {
    "conversion": "Focus on driving immediate action with clear benefits",
    "awareness": "Focus on brand storytelling and stopping the scroll",
    "urgency": "Emphasize limited time offers or scarcity",
    "emotional": "Connect through values, lifestyle, and emotional resonance",
}


def strategy_label(strategy: str) -> str:
    """'conversion' -> 'Conversion Focus'"""
    return f"{strategy.capitalize()} Focus"


def _brand_block(brand_guide) -> str:
    ctx = brand_guide.prompt_context
    return f"""BRAND CONTEXT:
- Company: {ctx['company_name']}
- Industry: {ctx['industry']}
- Brand Voice: {ctx['voice']}
- Tone Guidelines: {ctx['tone_guidelines']}
- Value Proposition: {ctx['value_proposition']}
- Brand Key Messages: {ctx['key_messages']}
- Phrases to Avoid: {ctx['avoid_phrases']}
- Brand Colors: {ctx['colors']}
- Brand Target Audience: {ctx['target_audience']}
- Competitor Context: {ctx['competitor_context']}"""


def _campaign_block(campaign, channel_purpose: Optional[str]) -> str:
    ctx = campaign.context_summary
    block = f"""CAMPAIGN DETAILS:
- Campaign Name: {ctx['name']}
- Objective: {ctx['objective'] or 'Drive engagement'}
- Key Messages: {', '.join(ctx['key_messages']) or 'Not specified'}
- Call to Action: {ctx['cta'] or 'Learn More'}
- Urgency Level: {ctx['urgency']}"""
    if channel_purpose:
        block += f"\n- Channel Purpose: {channel_purpose}"
    return block


def _audience_block(audience, include_demographics: bool) -> str:
    s = audience.summary
    lines = [
        "TARGET AUDIENCE:",
        f"- Segment: {s['name']}",
        f"- Description: {s['description'] or 'Not specified'}",
    ]
    if include_demographics:
        lines.append(f"- Demographics: {s['demographics'] or 'Not specified'}")
    lines += [
        f"- Propensity Level: {s['propensity']}",
        f"- Interests: {s['interests'] or 'Not specified'}",
        f"- Pain Points: {s['pain_points'] or 'Not specified'}",
        f"- Key Motivators: {s['motivators'] or 'Not specified'}",
    ]
    if include_demographics:
        lines.append(f"- Preferred Tone: {s['tone'] or 'Match brand voice'}")
    return "\n".join(lines)


def build_email_prompt(brand_guide, campaign, audience, strategy: str, channel_purpose: str = None) -> str:
    return f"""You are an expert marketing copywriter creating email content.

{_brand_block(brand_guide)}

{_campaign_block(campaign, channel_purpose)}

{_audience_block(audience, include_demographics=True)}

VERSION STRATEGY: {strategy}
- {EMAIL_DIRECTIVES[strategy]}

Generate email content with the following constraints:
1. Subject Line: Max 60 characters, optimize for open rates
2. Preheader: Max 90 characters, complement the subject line
3. Headline: Max 80 characters, capture attention
4. Body Copy: 150-200 words, compelling and on-brand
5. CTA Text: Max 25 characters, action-oriented

Respond ONLY with a valid JSON object in this exact format:
{{
  "subjectLine": "Your subject line here",
  "preheader": "Your preheader text here",
  "headline": "Your headline here",
  "bodyCopy": "Your body copy here...",
  "ctaText": "Your CTA here"
}}"""


def build_meta_ad_prompt(brand_guide, campaign, audience, strategy: str, channel_purpose: str = None) -> str:
    return f"""You are an expert social media advertising copywriter creating Meta (Facebook/Instagram) ad content.

{_brand_block(brand_guide)}

{_campaign_block(campaign, channel_purpose)}

{_audience_block(audience, include_demographics=False)}

VERSION STRATEGY: {strategy}
- {META_AD_DIRECTIVES[strategy]}

Generate Meta ad content with the following constraints (per Meta's ad specs):
1. Primary Text: Max 125 characters for optimal display (can be up to 500)
2. Headline: Max 40 characters
3. Description: Max 125 characters
4. CTA Button: Choose from: {', '.join(META_CTA_BUTTONS)}

Respond ONLY with a valid JSON object in this exact format:
{{
  "primaryText": "Your primary text here",
  "headline": "Your headline here",
  "description": "Your description here",
  "ctaButton": "Learn More"
}}"""


PROMPT_BUILDERS = {
    CHANNEL_EMAIL: build_email_prompt,
    CHANNEL_META_ADS: build_meta_ad_prompt,
}


def build_prompt(
    brand_guide,
    campaign,
    audience,
    channel_type: str,
    strategy: str,
    instructions: Optional[str] = None,
    channel_purpose: Optional[str] = None,
) -> str:
    if channel_type not in PROMPT_BUILDERS:
        raise ValidationFailure(f"Unsupported channel type: {channel_type}")
    if strategy not in EMAIL_DIRECTIVES:
        raise ValidationFailure(f"Unsupported strategy: {strategy}")

    prompt = PROMPT_BUILDERS[channel_type](brand_guide, campaign, audience, strategy, channel_purpose)

    if instructions:
        prompt += f"\n\nADDITIONAL INSTRUCTIONS:\n{instructions}"
    return prompt
