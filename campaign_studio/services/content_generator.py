import json
import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from campaign_studio.core.errors import GenerationFailure
from campaign_studio.schemas.content import Content, parse_content
from campaign_studio.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


def extract_json_object(text: str) -> Optional[str]:
    """
    Returns the first balanced {...} substring of `text`, or None.
    Braces inside JSON string literals are ignored.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        # unbalanced from here; try the next opening brace
        start = text.find("{", start + 1)
    return None


@dataclass
class GeneratedContent:
    content: Content
    prompt: str


class ContentGenerator:
    """
    Builds a channel/strategy prompt, calls the text-generation capability
    once and parses the reply into typed content. Never touches the database.
    """

    def __init__(self, llm, max_tokens: int = None):
        self.llm = llm
        self.max_tokens = max_tokens

    def generate(
        self,
        brand_guide,
        campaign,
        audience,
        channel_type: str,
        strategy: str,
        instructions: Optional[str] = None,
        channel_purpose: Optional[str] = None,
    ) -> GeneratedContent:
        prompt = build_prompt(
            brand_guide, campaign, audience, channel_type, strategy,
            instructions=instructions, channel_purpose=channel_purpose,
        )
        return GeneratedContent(content=self.complete(prompt, channel_type), prompt=prompt)

    def complete(self, prompt: str, channel_type: str) -> Content:
        try:
            reply = self.llm.complete(prompt, max_tokens=self.max_tokens)
        except Exception as e:
            raise GenerationFailure(f"Content generation failed: {e}") from e

        raw = extract_json_object(reply or "")
        if raw is None:
            raise GenerationFailure("Content generation failed: No valid JSON found in response")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise GenerationFailure(f"Content generation failed: {e}") from e

        try:
            return parse_content(channel_type, data)
        except ValidationError as e:
            missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise GenerationFailure(
                f"Content generation failed: Response is missing or has invalid fields: {missing}"
            ) from e
