"""Conversational backend abstractions and a Gemini REST implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError

from logic.units import format_temperature
from models.observation import Observation
from tools.errors import BackendUnavailable
from tools.observability import instrument_tool


LOGGER = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
GENERATION_CONFIG = {
    "temperature": 0.7,
    "maxOutputTokens": 200,
    "topP": 0.8,
    "topK": 40,
}


class _Part(BaseModel):
    text: str = ""


class _Content(BaseModel):
    parts: List[_Part] = []


class _Candidate(BaseModel):
    content: Optional[_Content] = None


class _GenerateResponse(BaseModel):
    candidates: List[_Candidate] = []


def weather_context_line(context: Observation | None, metric: bool = True) -> str:
    """Describe the current observation for a prompt, or say there is none."""

    if context is None:
        return "No current weather data available"
    return (
        f"Current weather: {context.description}, "
        f"Temperature: {format_temperature(context.temperature, metric)}, "
        f"Location: {context.location_name}"
    )


def build_prompt(user_text: str, context: Observation | None, metric: bool = True) -> str:
    return (
        "You are a helpful weather assistant chatbot. "
        f"Here's the current weather context: {weather_context_line(context, metric)}.\n"
        f"User question: {user_text}\n\n"
        "Please provide a helpful, friendly response about weather or general assistance. "
        "Keep responses concise (under 100 words) and conversational."
    )


class ConversationalBackend(ABC):
    """External natural-language responder consulted before the keyword fallback."""

    @abstractmethod
    def generate(self, user_text: str, context: Observation | None = None, metric: bool = True) -> str:
        """Return a reply or raise :class:`BackendUnavailable`."""


class GeminiBackend(ConversationalBackend):
    """Gemini ``generateContent`` client over plain HTTPS."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.0-flash",
        timeout_seconds: float = 10.0,
        base_url: str = GEMINI_BASE_URL,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"

    @instrument_tool("generate_chat_reply")
    def generate(self, user_text: str, context: Observation | None = None, metric: bool = True) -> str:
        if not self.api_key:
            raise BackendUnavailable("missing_api_key")

        body = {
            "contents": [{"parts": [{"text": build_prompt(user_text, context, metric)}]}],
            "generationConfig": GENERATION_CONFIG,
        }
        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            parsed = _GenerateResponse.model_validate(response.json())
        except (requests.JSONDecodeError, ValidationError) as exc:
            LOGGER.warning("Conversational backend returned an unexpected payload", exc_info=exc)
            raise BackendUnavailable("invalid_payload") from exc
        except (requests.Timeout, requests.RequestException) as exc:
            LOGGER.warning("Conversational backend request failed", exc_info=exc)
            raise BackendUnavailable("request_error") from exc

        for candidate in parsed.candidates:
            if candidate.content and candidate.content.parts and candidate.content.parts[0].text.strip():
                return candidate.content.parts[0].text.strip()
        raise BackendUnavailable("empty_response")


class StaticBackend(ConversationalBackend):
    """Offline backend returning a fixed reply, or failing on demand."""

    def __init__(self, reply: str = "", fail: bool = False) -> None:
        self.reply = reply
        self.fail = fail
        self.calls: List[str] = []

    def generate(self, user_text: str, context: Observation | None = None, metric: bool = True) -> str:
        self.calls.append(user_text)
        if self.fail:
            raise BackendUnavailable("static_failure")
        return self.reply


__all__ = [
    "ConversationalBackend",
    "GeminiBackend",
    "StaticBackend",
    "build_prompt",
    "weather_context_line",
]
