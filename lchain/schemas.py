"""Documents, prompt values, agent events and the retriever interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Union

from lchain.messages import Message


@dataclass
class Document:
    """A piece of text with metadata and a relevance score."""

    page_content: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    score: float = 0.0

    def with_metadata(self, metadata: dict[str, Any]) -> Document:
        """Return a copy of this document with the given metadata."""
        return replace(self, metadata=dict(metadata))

    def with_score(self, score: float) -> Document:
        """Return a copy of this document with the given score."""
        return replace(self, score=float(score))


class PromptValue:
    """A formatted prompt, held as a list of messages."""

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages = list(messages)

    @classmethod
    def from_string(cls, text: str) -> PromptValue:
        """A prompt made of one human message."""
        return cls([Message.human(text)])

    @classmethod
    def from_messages(cls, messages: Iterable[Message]) -> PromptValue:
        """A prompt made of the given messages."""
        return cls(messages)

    def to_chat_messages(self) -> list[Message]:
        """Return a copy of the prompt's messages."""
        return list(self._messages)

    def __str__(self) -> str:
        return "\n".join(f"{m.message_type}: {m.content}" for m in self._messages)

    def __repr__(self) -> str:
        return f"PromptValue({self._messages!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PromptValue):
            return NotImplemented
        return self._messages == other._messages


@dataclass
class AgentAction:
    """A tool call that an agent has decided to make."""

    tool: str
    tool_input: str
    log: str


@dataclass
class AgentFinish:
    """The final output of an agent."""

    output: str


AgentEvent = Union[AgentAction, AgentFinish]


class Retriever(ABC):
    """Something that finds documents relevant to a query."""

    @abstractmethod
    async def get_relevant_documents(self, query: str) -> list[Document]:
        """Return the documents relevant to `query`."""