import logging
import openai
from tenacity import retry, retry_if_exception_type, wait_exponential

from campaign_studio.core.config import settings

logger = logging.getLogger(__name__)

# Transport-level failures worth another attempt when LLM_RETRY_ATTEMPTS > 1
TRANSIENT_ERRORS = (openai.APIConnectionError, openai.APITimeoutError, openai.RateLimitError)


def _configured_attempts(retry_state) -> bool:
    # Read per call so LLM_RETRY_ATTEMPTS can change without re-importing
    return retry_state.attempt_number >= settings.LLM_RETRY_ATTEMPTS


class LLMService:
    """Thin client around an OpenAI-compatible chat completion endpoint."""

    def __init__(self, api_key=None, base_url=None, model=None, timeout=None):
        self.api_key = api_key or settings.LLM_API_KEY
        self.base_url = base_url or settings.LLM_BASE_URL
        self.model = model or settings.LLM_MODEL
        self.timeout = timeout or settings.LLM_TIMEOUT_SECONDS
        self._client = None

    @property
    def client(self) -> openai.OpenAI:
        # Built on first use; a missing API key raises openai.OpenAIError here
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,  # retries are tenacity's job
            )
        return self._client

    @retry(
        stop=_configured_attempts,
        wait=wait_exponential(multiplier=1, min=4, max=10),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    def complete(self, prompt: str, max_tokens: int = None) -> str:
        """
        Sends a single user prompt and returns the reply text.
        Any client/transport error propagates to the caller.
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens or settings.LLM_MAX_TOKENS,
                temperature=0.7,
                stream=False,
            )
            return (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.error(f"LLM Error ({self.model}): {e}")
            raise
