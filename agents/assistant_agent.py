"""Chat assistant that prefers the conversational backend and falls back to keywords."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict

from skycast_app.logging_config import get_logger, log_event, operation_context
from logic.intent_classifier import classify_and_reply
from models.chat import ChatHistory
from models.observation import Observation
from tools.conversational_backend import ConversationalBackend
from tools.errors import BackendUnavailable


LOGGER = get_logger(__name__)

CONNECTION_NOTICE = (
    "I'm having trouble connecting to my AI brain right now 🤖 "
    "But I can still help with basic weather questions! "
)


class WeatherAssistantAgent:
    """Answers weather questions and records the conversation.

    The backend is always tried first when configured. Only a
    :class:`BackendUnavailable` from it routes the message to the keyword
    classifier, whose reply is then prefixed with a connection notice.
    """

    def __init__(
        self,
        backend: ConversationalBackend | None = None,
        rng: random.Random | None = None,
        metric: bool = True,
        history: ChatHistory | None = None,
    ) -> None:
        self.backend = backend
        self.rng = rng or random.Random()
        self.metric = metric
        self.history = history if history is not None else ChatHistory()

    def handle_message(
        self, message: str, context: Observation | None = None, session_id: str | None = None
    ) -> Dict[str, Any]:
        """Reply to one user message using ``context`` as the latest observation."""

        with operation_context("agent:assistant.handle_message", session_id=session_id) as correlation_id:
            text = (message or "").strip()
            self.history.append("user", text)

            source = "classifier"
            if self.backend is None:
                reply = classify_and_reply(text, context, self.rng)
            else:
                try:
                    reply = self.backend.generate(text, context, self.metric)
                    source = "backend"
                except BackendUnavailable as exc:
                    log_event(
                        LOGGER,
                        level=logging.WARNING,
                        event="backend_unavailable",
                        agent="assistant",
                        reason=exc.reason,
                        correlation_id=correlation_id,
                    )
                    reply = CONNECTION_NOTICE + classify_and_reply(text, context, self.rng)
                    source = "fallback"

            self.history.append("assistant", reply)
            log_event(
                LOGGER,
                level=logging.INFO,
                event="agent_call_completed",
                agent="assistant",
                method="handle_message",
                correlation_id=correlation_id,
                source=source,
                has_context=context is not None,
            )
            return {"status": "ok", "agent": "assistant", "source": source, "message": reply}


__all__ = ["WeatherAssistantAgent", "CONNECTION_NOTICE"]
