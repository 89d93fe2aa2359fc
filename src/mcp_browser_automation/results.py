"""
Result types passed between handlers, the dispatcher and the transport.

Handlers return a `ToolResult` (`Success` or `Failure`); the dispatcher maps it
onto an `InvocationResponse`, the transport-neutral response envelope.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .errors import ErrorKind


@dataclass(frozen=True)
class TextItem:
    text: str
    type: str = field(default="text", init=False)


@dataclass(frozen=True)
class ImageItem:
    """An image encoded as base64 text."""

    data: str
    mime_type: str = "image/png"
    type: str = field(default="image", init=False)


ContentItem = Union[TextItem, ImageItem]


@dataclass(frozen=True)
class Success:
    content: List[ContentItem]


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str


ToolResult = Union[Success, Failure]


@dataclass(frozen=True)
class InvocationResponse:
    """Ordered content items plus an error flag."""

    content: List[ContentItem]
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "InvocationResponse":
        return cls(content=[TextItem(text=message)], is_error=True, error_kind=kind)

    def texts(self) -> List[str]:
        return [item.text for item in self.content if isinstance(item, TextItem)]

    def images(self) -> List[ImageItem]:
        return [item for item in self.content if isinstance(item, ImageItem)]


__all__ = [
    "TextItem",
    "ImageItem",
    "ContentItem",
    "Success",
    "Failure",
    "ToolResult",
    "InvocationResponse",
]
