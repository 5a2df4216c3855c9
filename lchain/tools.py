"""The interface of tools an agent can call."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Tool(ABC):
    """A named capability that takes text input and returns text."""

    @abstractmethod
    def name(self) -> str:
        """Return the tool's name."""

    @abstractmethod
    def description(self) -> str:
        """Return what the tool does and what input it expects."""

    @abstractmethod
    async def call(self, input: str) -> str:
        """Run the tool on `input` and return its output."""