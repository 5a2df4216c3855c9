"""Chat messages and their types."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MessageType(str, Enum):
    """Who a message comes from."""

    SYSTEM = "system"
    AI = "ai"
    HUMAN = "human"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Message:
    """A message with its content and the kind of speaker that sent it."""

    content: str = ""
    message_type: MessageType = MessageType.SYSTEM

    @classmethod
    def human(cls, content: Any) -> Message:
        """Create a message from the human user."""
        return cls(str(content), MessageType.HUMAN)

    @classmethod
    def system(cls, content: Any) -> Message:
        """Create a system message."""
        return cls(str(content), MessageType.SYSTEM)

    @classmethod
    def ai(cls, content: Any) -> Message:
        """Create a message from the assistant."""
        return cls(str(content), MessageType.AI)

    def to_dict(self) -> dict[str, str]:
        """Return the message as a JSON-compatible mapping."""
        return {"content": self.content, "message_type": self.message_type.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        """Build a message from a mapping such as the one `to_dict` returns."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        try:
            content = data["content"]
            raw_type = data["message_type"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(content, str):
            raise ValueError("field 'content' must be a string")
        try:
            message_type = MessageType(raw_type)
        except ValueError:
            raise ValueError(f"unknown message type {raw_type!r}") from None
        return cls(content, message_type)


def messages_from_value(value: Any) -> list[Message]:
    """Turn a sequence of messages or message mappings into a list of messages."""
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ValueError(f"expected a sequence of messages, got {type(value).__name__}")
    return [item if isinstance(item, Message) else Message.from_dict(item) for item in value]