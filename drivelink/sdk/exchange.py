"""Messages and exchanges passed between endpoints and processors."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class Message:
    """A message body with its headers."""

    body: Any = None
    headers: Dict[str, Any] = field(default_factory=dict)

    def get_header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name, default)

    def set_header(self, name: str, value: Any):
        self.headers[name] = value


@dataclass
class Exchange:
    """One unit of work flowing through a producer or from a consumer."""

    in_message: Message = field(default_factory=Message)
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, body: Any = None, headers: Dict[str, Any] = None) -> "Exchange":
        return cls(in_message=Message(body=body, headers=dict(headers or {})))

    @property
    def body(self) -> Any:
        return self.in_message.body
