"""String prompt templates and prompt arguments."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from lchain.messages import Message
from lchain.schemas import PromptValue

logger = logging.getLogger(__name__)

PromptArgs = dict[str, Any]


class TemplateFormat(Enum):
    """How variables are marked in a template."""

    FSTRING = "f-string"
    JINJA2 = "jinja2"


def _json_default(value: Any) -> Any:
    if isinstance(value, Message):
        return value.to_dict()
    raise TypeError(f"value of type {type(value).__name__} cannot be rendered in a prompt")


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


@dataclass(frozen=True)
class PromptTemplate:
    """A text template with named variables to fill in."""

    template: str
    variables: list[str] = field(default_factory=list)
    template_format: TemplateFormat = TemplateFormat.FSTRING

    def _placeholder(self, key: str) -> str:
        if self.template_format is TemplateFormat.JINJA2:
            return "{{" + key + "}}"
        return "{" + key + "}"

    def format(self, input_variables: Mapping[str, Any]) -> str:
        """Fill the template with the given values.

        Raises ValueError if a declared variable has no value.
        """
        for key in self.variables:
            if key not in input_variables:
                raise ValueError(f"Variable {key} is missing from input variables")

        prompt = self.template
        for key, value in input_variables.items():
            prompt = prompt.replace(self._placeholder(key), _render_value(value))

        logger.debug("Formatted prompt: %s", prompt)
        return prompt

    def format_prompt(self, input_variables: Mapping[str, Any]) -> PromptValue:
        """Fill the template and wrap the result as a single human message."""
        return PromptValue.from_messages([Message.human(self.format(input_variables))])

    def get_input_variables(self) -> list[str]:
        """Return the names of the variables the template needs."""
        return list(self.variables)


def template_fstring(template: str, *args: str) -> PromptTemplate:
    """Create a template whose variables look like ``{name}``."""
    return PromptTemplate(str(template), [str(a) for a in args], TemplateFormat.FSTRING)


def template_jinja2(template: str, *args: str) -> PromptTemplate:
    """Create a template whose variables look like ``{{name}}``."""
    return PromptTemplate(str(template), [str(a) for a in args], TemplateFormat.JINJA2)


def prompt_args(**kwargs: Any) -> PromptArgs:
    """Collect keyword arguments into a mapping of prompt inputs."""
    return dict(kwargs)