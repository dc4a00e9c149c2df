# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/external/openai_chat.py
# 🧭 Purpose (Layman Explanation):
# The shared way this module asks the AI service a question and reads back its answer.
# 🧪 Purpose (Technical Summary):
# OpenAI-compatible client construction from settings plus chat-completion request and
# response-content extraction over the shared APIClient.
# 🔗 Dependencies:
# - garden_calendar.shared.infrastructure.external_apis.api_client (aiohttp + tenacity)
# - garden_calendar.shared.config.settings
# 🔄 Connected Modules / Calls From:
# OpenAIPlantingDateRecommender, OpenAIPlantProfileGenerator, presentation dependencies

from typing import Any, Dict, List, Optional

from garden_calendar.shared.config.settings import Settings, get_settings
from garden_calendar.shared.core.exceptions import ExternalAPIError
from garden_calendar.shared.infrastructure.external_apis.api_client import APIClient, create_api_client

API_NAME = "openai"


def create_openai_client(
    max_retries: int,
    timeout: int,
    settings: Optional[Settings] = None,
) -> APIClient:
    """Build an APIClient for the configured OpenAI-compatible endpoint."""
    settings = settings or get_settings()
    config = settings.get_ai_api_config()
    return create_api_client(
        API_NAME,
        base_url=config["api_url"],
        api_key=config["api_key"],
        timeout=timeout,
        max_retries=max_retries,
    )


def message(role: str, content: str) -> Dict[str, str]:
    return {"role": role, "content": content}


def extract_content(response: Dict[str, Any]) -> str:
    """Text of the first choice of a chat completion response."""
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ExternalAPIError(
            "Chat completion response has no message content",
            api_name=API_NAME,
            api_response=str(response)[:500],
        ) from e
    return content or ""


async def complete_chat(
    client: APIClient,
    model: str,
    messages: List[Dict[str, str]],
    temperature: float = 0.7,
    max_tokens: int = 500,
    timeout: Optional[int] = None,
) -> str:
    """Send a chat completion request and return the answer text."""
    response = await client.post(
        "chat/completions",
        data={
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        },
        timeout=timeout,
    )
    return extract_content(response)
