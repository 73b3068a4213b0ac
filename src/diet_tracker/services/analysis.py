"""AI food analysis over a chat-completion endpoint."""

import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from diet_tracker.domain.errors import AnalysisError, ValidationError
from diet_tracker.domain.vision import FoodImageAnalysis, ProductSuggestion

_FENCE_PATTERN = re.compile(r"```(?:json)?\n?")

_logger = logging.getLogger(__name__)

IMAGE_PROMPT = """You are a nutrition expert. Analyze this food image and provide \
detailed nutritional information.

Return ONLY a valid JSON object (no markdown, no code blocks) with this exact \
structure:
{
  "success": true,
  "totalCalories": number,
  "totalProtein": number,
  "totalCarbs": number,
  "totalFat": number,
  "items": [
    {
      "name": "food item name",
      "calories": number,
      "protein": number,
      "carbs": number,
      "fat": number,
      "portion": number,
      "unit": "g" or "ml" or "piece",
      "confidence": "high" or "medium" or "low"
    }
  ],
  "healthTip": "brief health insight about this meal"
}

Rules:
- Identify ALL visible food items separately
- Estimate realistic portion sizes
- Use reasonable calorie estimates based on typical serving sizes
- If you cannot identify food, return {"success": false, "error": "Could not \
identify food"}
- Numbers should be integers, not strings"""

TEXT_PROMPT = """You are a nutrition expert. Given a food description, provide \
nutritional information.

Description: "{description}"

Return ONLY a valid JSON object (no markdown, no code blocks) with this structure:
{{
  "success": true,
  "product": {{
    "name": "proper food name (capitalize properly)",
    "emoji": "single relevant emoji",
    "category": "Meal" or "Fruit" or "Coffee" or "Snack",
    "portion": number (typical portion size),
    "unit": "g" or "ml" or "pc",
    "calories": number,
    "protein": number,
    "carbs": number,
    "fat": number
  }}
}}

Rules:
- Parse quantity from description (e.g., "1 large banana" = 1 pc, ~120g equivalent)
- Use realistic nutritional values for the specified portion
- "pc" means pieces (for items like fruits, eggs, slices)
- Numbers should be integers
- If description is unclear, return {{"success": false, "error": "Could not \
understand description"}}"""


class ChatCompletionClient(Protocol):
    """Interface for a chat-completion LLM endpoint."""

    async def complete(
        self, *, model: str, messages: list[dict[str, object]], max_tokens: int
    ) -> str:
        """Return the text content of the first completion choice."""


@dataclass
class FoodAnalysisService:
    """Builds prompts for food analysis and validates the replies."""

    client: ChatCompletionClient
    model: str
    image_max_tokens: int = 1000
    text_max_tokens: int = 500

    async def analyze_image(
        self, image_bytes: bytes, mime_type: str | None = None
    ) -> FoodImageAnalysis:
        """Estimate the foods and nutrients visible in a photo."""
        if not image_bytes:
            raise ValidationError("No image provided")
        data_url = to_data_url(image_bytes, mime_type)
        messages: list[dict[str, object]] = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": IMAGE_PROMPT},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            }
        ]
        raw = await self.client.complete(
            model=self.model, messages=messages, max_tokens=self.image_max_tokens
        )
        payload = parse_json_reply(raw)
        items = payload.get("items")
        if isinstance(items, list):
            payload["items"] = [
                {**item, "id": index}
                for index, item in enumerate(items, start=1)
                if isinstance(item, dict)
            ]
        try:
            return FoodImageAnalysis.model_validate(payload)
        except PydanticValidationError as exc:
            raise AnalysisError("Failed to parse AI response") from exc

    async def analyze_text(self, description: str) -> ProductSuggestion:
        """Estimate product values from a free-text description."""
        if not description or not description.strip():
            raise ValidationError("No description provided")
        messages: list[dict[str, object]] = [
            {
                "role": "user",
                "content": TEXT_PROMPT.format(description=description.strip()),
            }
        ]
        raw = await self.client.complete(
            model=self.model, messages=messages, max_tokens=self.text_max_tokens
        )
        try:
            return ProductSuggestion.model_validate(parse_json_reply(raw))
        except PydanticValidationError as exc:
            raise AnalysisError("Failed to parse AI response") from exc


def parse_json_reply(text: str) -> dict[str, object]:
    """Strip Markdown code fences and parse the JSON object."""
    cleaned = _FENCE_PATTERN.sub("", text or "").strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        _logger.warning("Unparseable AI response: %s", cleaned[:200])
        raise AnalysisError("Failed to parse AI response") from exc
    if not isinstance(payload, dict):
        raise AnalysisError("AI response is not a JSON object")
    return payload


def to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Convert bytes to a base64 data URL for image input."""
    resolved = mime_type or detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{resolved};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
