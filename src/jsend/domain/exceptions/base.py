# src/jsend/domain/exceptions/base.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""
Base JSend exceptions.

Purpose:
    Error types raised while building envelopes, plus the serialization
    failure type surfaced unchanged from the JSON backend.

Layer:
    domain/exceptions

Notes:
    - ``InvalidArgumentError`` is raised synchronously by envelope
      constructors; the renderer never raises it.
    - ``SerializationFailure`` is the backend's own exception class
      (``pydantic_core.PydanticSerializationError``). It is re-exported here so
      callers can catch it without importing the backend directly.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticSerializationError

__all__ = ["JSendError", "InvalidArgumentError", "SerializationFailure"]

SerializationFailure = PydanticSerializationError


class JSendError(Exception):
    """Base class for all JSend envelope errors.

    Args:
        message: Human-readable error message.
        details: Optional machine-readable diagnostic payload.
    """

    code: str = "JSEND_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(JSendError):
    """Raised when a required constructor argument is missing or malformed.

    Args:
        message: Human-readable error message.
        field: Name of the offending argument, exposed as ``details["field"]``.
    """

    code = "INVALID_ARGUMENT"

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message, details={"field": field})
        self.field = field
