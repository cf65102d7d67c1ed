"""Classified errors raised while resolving, decoding and transcoding pixels.

Every failure that reaches a caller is one of the `PixeliteError` subclasses
below, carrying a machine-readable `code`, a human message and a read-only
`details` mapping (URL, path, type name, byte length, ...).

`InvalidInputTypeError` is deliberately *not* part of the taxonomy: it flags
a source that is the wrong shape for the active environment, which is a
programmer error rather than a runtime fault.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional


class ErrorCode(str, Enum):
    DECODE_FAILED = "DECODE_FAILED"
    INVALID_LENGTH = "INVALID_LENGTH"
    AMBIGUOUS_LENGTH = "AMBIGUOUS_LENGTH"
    NETWORK_ERROR = "NETWORK_ERROR"
    FILE_READ_FAILED = "FILE_READ_FAILED"
    UNSUPPORTED_SOURCE = "UNSUPPORTED_SOURCE"


class PixeliteError(Exception):
    """Base class for classified failures."""

    code: ClassVar[ErrorCode] = ErrorCode.DECODE_FAILED

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = str(message)
        self.details: Mapping[str, Any] = MappingProxyType(dict(details or {}))
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": dict(self.details),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, details={dict(self.details)!r})"


class DecodeError(PixeliteError):
    code = ErrorCode.DECODE_FAILED


class InvalidLengthError(DecodeError):
    """Buffer length is incompatible with the requested channel count."""

    code = ErrorCode.INVALID_LENGTH


class AmbiguousLengthError(InvalidLengthError):
    """Buffer length is a multiple of neither 3 nor 4."""

    code = ErrorCode.AMBIGUOUS_LENGTH


class NetworkError(PixeliteError):
    code = ErrorCode.NETWORK_ERROR


class FileReadError(PixeliteError):
    code = ErrorCode.FILE_READ_FAILED


class UnsupportedSourceError(PixeliteError):
    code = ErrorCode.UNSUPPORTED_SOURCE


class InvalidInputTypeError(TypeError):
    """Source shape is valid only for the other environment (or for none)."""

    def __init__(self, message: str, *, environment: str, received_type: str) -> None:
        super().__init__(message)
        self.environment = str(environment)
        self.received_type = str(received_type)
