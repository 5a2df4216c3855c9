"""Chat prompt templates that produce lists of messages."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from lchain.messages import Message, messages_from_value
from lchain.prompt import PromptTemplate
from lchain.schemas import PromptValue

logger = logging.getLogger(__name__)


class MessageFormatter(ABC):
    """Something that turns input variables into chat messages."""

    @abstractmethod
    def format_messages(self, input_variables: Mapping[str, Any]) -> list[Message]:
        """Produce messages from the given input variables."""

    @abstractmethod
    def input_variables(self) -> list[str]:
        """Return the names of the variables this formatter needs."""

    def format_prompt(self, input_variables: Mapping[str, Any]) -> PromptValue:
        """Produce a prompt value from the given input variables."""
        return PromptValue.from_messages(self.format_messages(input_variables))

    def get_input_variables(self) -> list[str]:
        """Return the names of the variables this formatter needs."""
        return self.input_variables()


class _MessagePromptTemplate(MessageFormatter):
    _make_message: ClassVar[Callable[[Any], Message]]

    def __init__(self, prompt: PromptTemplate) -> None:
        self.prompt = prompt

    def format_messages(self, input_variables: Mapping[str, Any]) -> list[Message]:
        message = type(self)._make_message(self.prompt.format(input_variables))
        logger.debug("message: %r", message)
        return [message]

    def input_variables(self) -> list[str]:
        return list(self.prompt.variables)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.prompt!r})"


class HumanMessagePromptTemplate(_MessagePromptTemplate):
    """A template that produces one human message."""

    _make_message = staticmethod(Message.human)


class SystemMessagePromptTemplate(_MessagePromptTemplate):
    """A template that produces one system message."""

    _make_message = staticmethod(Message.system)


class AIMessagePromptTemplate(_MessagePromptTemplate):
    """A template that produces one AI message."""

    _make_message = staticmethod(Message.ai)


@dataclass(frozen=True)
class MessagesPlaceholder:
    """A slot filled by a list of messages taken from the input variables."""

    name: str


ChatItem = Union[Message, MessageFormatter, MessagesPlaceholder]


class ChatMessageFormatter(MessageFormatter):
    """A sequence of fixed messages, templates and message placeholders."""

    def __init__(self, items: Iterable[ChatItem] = ()) -> None:
        self._items: list[ChatItem] = []
        for item in items:
            self._add(item)

    def _add(self, item: ChatItem) -> None:
        if isinstance(item, Message):
            self.add_message(item)
        elif isinstance(item, MessageFormatter):
            self.add_template(item)
        elif isinstance(item, MessagesPlaceholder):
            self.add_messages_placeholder(item.name)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a chat formatter")

    def add_message(self, message: Message) -> None:
        """Append a fixed message."""
        self._items.append(message)

    def add_template(self, template: MessageFormatter) -> None:
        """Append a template whose messages are produced when formatting."""
        self._items.append(template)

    def add_messages_placeholder(self, placeholder: str) -> None:
        """Append a slot filled from the input variable named `placeholder`."""
        self._items.append(MessagesPlaceholder(str(placeholder)))

    def format_messages(self, input_variables: Mapping[str, Any]) -> list[Message]:
        result: list[Message] = []
        for item in self._items:
            if isinstance(item, Message):
                result.append(item)
            elif isinstance(item, MessagesPlaceholder):
                if item.name not in input_variables:
                    raise KeyError(f"placeholder {item.name!r} is missing from input variables")
                result.extend(messages_from_value(input_variables[item.name]))
            else:
                result.extend(item.format_messages(input_variables))
        return result

    def input_variables(self) -> list[str]:
        variables: list[str] = []
        for item in self._items:
            if isinstance(item, MessagesPlaceholder):
                variables.append(item.name)
            elif isinstance(item, MessageFormatter):
                variables.extend(item.input_variables())
        return variables

    def __len__(self) -> int:
        return len(self._items)


def message_formatter(*args: ChatItem) -> ChatMessageFormatter:
    """Build a chat formatter from messages, templates and placeholders."""
    return ChatMessageFormatter(args)