"""Common interface implemented by every intel type handler."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Mapping, Tuple, Type

import discord

from ..errors import IntelInputError
from ..types import IntelContent, IntelEntity
from .ids import generate_intel_id


@dataclass(frozen=True)
class OptionSpec:
    """One input option a handler collects from the user."""

    name: str
    description: str
    required: bool = True
    choices: Tuple[str, ...] = ()


class IntelTypeHandler(ABC):
    """Parses, validates, identifies and presents one kind of intel."""

    type: ClassVar[str]
    description: ClassVar[str]
    content_class: ClassVar[Type[IntelContent]]

    @abstractmethod
    def options(self) -> List[OptionSpec]:
        ...

    @abstractmethod
    def build_content(self, values: Dict[str, str]) -> IntelContent:
        ...

    @abstractmethod
    def matches_raw(self, data: Mapping[str, Any]) -> bool:
        """True when a stored mapping has this handler's content shape."""

    @abstractmethod
    def create_embed(self, entity: IntelEntity) -> discord.Embed:
        ...

    @abstractmethod
    def success_message(self, content: Any) -> str:
        ...

    def parse(self, raw: Mapping[str, Any]) -> IntelContent:
        """Turn raw option values into typed content.

        Missing optional values become empty strings; missing required values
        and values outside an option's choices raise :class:`IntelInputError`.
        """

        values: Dict[str, str] = {}
        for option in self.options():
            value = raw.get(option.name)
            text = "" if value is None else str(value).strip()
            if not text:
                if option.required:
                    raise IntelInputError(f"Missing required option: {option.name}")
                values[option.name] = ""
                continue
            if option.choices and text.lower() not in option.choices:
                raise IntelInputError(
                    f"Invalid value for {option.name}: {text!r} "
                    f"(expected one of {', '.join(option.choices)})"
                )
            values[option.name] = text.lower() if option.choices else text
        return self.build_content(values)

    def is_of_type(self, content: Any) -> bool:
        if isinstance(content, self.content_class):
            return True
        if isinstance(content, Mapping):
            return self.matches_raw(content)
        return False

    def content_from_dict(self, data: Mapping[str, Any]) -> IntelContent:
        return self.content_class.from_dict(dict(data))  # type: ignore[attr-defined]

    def generate_id(self) -> str:
        return generate_intel_id(self.type)


def _is_str(data: Mapping[str, Any], *keys: str) -> bool:
    return all(isinstance(data.get(key), str) for key in keys)


__all__ = ["IntelTypeHandler", "OptionSpec"]
