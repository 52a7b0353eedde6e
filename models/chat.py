"""Conversation data models."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterator, Literal

DEFAULT_MAX_TURNS = 50


class IntentCategory(str, Enum):
    GREETING = "greeting"
    WEATHER_GENERAL = "weather"
    CLOTHING = "clothing"
    ACTIVITIES = "activities"
    AIR_QUALITY = "air_quality"
    FORECAST = "forecast"
    HELP = "help"
    THANKS = "thanks"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ChatTurn:
    """Represents one conversational turn."""

    sender: Literal["user", "assistant"]
    text: str
    timestamp: float = field(default_factory=lambda: time.time())


class ChatHistory:
    """Ordered chat turns kept by the caller; the oldest turns drop past ``max_turns``."""

    def __init__(self, max_turns: int = DEFAULT_MAX_TURNS) -> None:
        if max_turns <= 0:
            raise ValueError("max_turns must be positive")
        self._turns: Deque[ChatTurn] = deque(maxlen=max_turns)

    @property
    def max_turns(self) -> int:
        return self._turns.maxlen or 0

    def append(self, sender: Literal["user", "assistant"], text: str) -> ChatTurn:
        turn = ChatTurn(sender=sender, text=text)
        self._turns.append(turn)
        return turn

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(list(self._turns))

    def __len__(self) -> int:
        return len(self._turns)


__all__ = ["DEFAULT_MAX_TURNS", "IntentCategory", "ChatTurn", "ChatHistory"]
