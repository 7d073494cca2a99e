"""
Message DTO used across the client layer.

Defines the `Message` dataclass and the `Role` enumeration representing the
sender role. Ordering of messages inside a call is significant and is always
preserved exactly as supplied by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Role of a message author."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass(frozen=True)
class Message:
    """A chat message passed to language models.

    Attributes:
        role: The role of the message author.
        content: Plain text content of the message.
        name: Optional sender name. For ``Role.TOOL`` messages this carries the
            id of the tool call the message answers.
    """

    role: Role
    content: str
    name: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(Role.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(Role.ASSISTANT, content)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "Message":
        """Build a tool-result message correlated with ``tool_call_id``."""
        return cls(Role.TOOL, content, name=tool_call_id)


__all__ = ["Message", "Role"]
