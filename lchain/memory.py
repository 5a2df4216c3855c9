"""Conversation memories that keep chat history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lchain.messages import Message


class BaseMemory(ABC):
    """Storage for the messages of a conversation."""

    @abstractmethod
    def messages(self) -> list[Message]:
        """Return the stored messages."""

    def add_user_message(self, message: Any) -> None:
        """Store a human message."""
        self.add_message(Message.human(message))

    def add_ai_message(self, message: Any) -> None:
        """Store an AI message."""
        self.add_message(Message.ai(message))

    @abstractmethod
    def add_message(self, message: Message) -> None:
        """Store a message."""

    @abstractmethod
    def clear(self) -> None:
        """Forget all stored messages."""

    def __str__(self) -> str:
        return "\n".join(f"{m.message_type}: {m.content}" for m in self.messages())


class DummyMemory(BaseMemory):
    """A memory that stores nothing."""

    def messages(self) -> list[Message]:
        return []

    def add_message(self, message: Message) -> None:
        pass

    def clear(self) -> None:
        pass


class SimpleMemory(BaseMemory):
    """A memory that keeps every message."""

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def messages(self) -> list[Message]:
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()


class WindowBufferMemory(BaseMemory):
    """A memory that keeps only the most recent `window_size` messages."""

    def __init__(self, window_size: int = 10) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size
        self._messages: list[Message] = []

    def messages(self) -> list[Message]:
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        if len(self._messages) >= self.window_size:
            del self._messages[0]
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()