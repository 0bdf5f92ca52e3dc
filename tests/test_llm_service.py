"""LLMService transport behaviour against a stubbed chat-completions client"""
from types import SimpleNamespace

import httpx
import openai
import pytest
from tenacity import wait_none

from campaign_studio.core.config import settings
from campaign_studio.services.llm_service import LLMService


class StubCompletions:
    """Plays back `outcomes` in order: exceptions are raised, strings become message content."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        message = SimpleNamespace(content=outcome)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _service(completions):
    service = LLMService(api_key="test-key", model="test-model")
    service._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return service


def _connection_error():
    return openai.APIConnectionError(request=httpx.Request("POST", "http://llm.test/v1/chat/completions"))


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(LLMService.complete.retry, "wait", wait_none())


def test_complete_returns_stripped_text():
    completions = StubCompletions("  {\"ok\": true}\n")
    assert _service(completions).complete("Hello", max_tokens=50) == '{"ok": true}'

    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 50
    assert call["messages"] == [{"role": "user", "content": "Hello"}]


def test_empty_content_becomes_empty_string():
    assert _service(StubCompletions(None)).complete("Hello") == ""
    assert _service(StubCompletions("")).complete("Hello") == ""


def test_default_max_tokens_from_settings():
    completions = StubCompletions("hi")
    _service(completions).complete("Hello")
    assert completions.calls[0]["max_tokens"] == settings.LLM_MAX_TOKENS


def test_transient_error_not_retried_by_default(monkeypatch):
    monkeypatch.setattr(settings, "LLM_RETRY_ATTEMPTS", 1)
    completions = StubCompletions(_connection_error(), "never reached")

    with pytest.raises(openai.APIConnectionError):
        _service(completions).complete("Hello")
    assert len(completions.calls) == 1


def test_transient_error_retried_when_configured(monkeypatch):
    monkeypatch.setattr(settings, "LLM_RETRY_ATTEMPTS", 3)
    completions = StubCompletions(_connection_error(), _connection_error(), "third time lucky")

    assert _service(completions).complete("Hello") == "third time lucky"
    assert len(completions.calls) == 3


def test_retries_stop_at_configured_attempts(monkeypatch):
    monkeypatch.setattr(settings, "LLM_RETRY_ATTEMPTS", 2)
    completions = StubCompletions(_connection_error(), _connection_error(), "too late")

    with pytest.raises(openai.APIConnectionError):
        _service(completions).complete("Hello")
    assert len(completions.calls) == 2


def test_other_errors_are_never_retried(monkeypatch):
    monkeypatch.setattr(settings, "LLM_RETRY_ATTEMPTS", 3)
    completions = StubCompletions(ValueError("bad request"), "unused")

    with pytest.raises(ValueError):
        _service(completions).complete("Hello")
    assert len(completions.calls) == 1


def test_client_is_built_lazily(monkeypatch):
    monkeypatch.setattr(settings, "LLM_API_KEY", None)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    service = LLMService()
    assert service._client is None

    with pytest.raises(openai.OpenAIError):
        service.complete("Hello")
