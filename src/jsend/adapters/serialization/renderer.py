# src/jsend/adapters/serialization/renderer.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""JSend renderer.

Purpose:
    Map a domain :class:`Envelope` onto the JSend wire layout. The layout is
    status-dependent rather than a uniform field dump:

        success -> {"status": "success", "data": {...}}
        fail    -> {"status": "fail", "data": {"message": m} | reasons | {}}
        error   -> {"status": "error", "message": m, "code"?: int, "data"?: {...}}

Responsibilities:
    * ``render`` builds the plain-Python object (insertion-ordered keys).
    * ``to_jsonable`` / ``render_json`` hand that object to pydantic-core for
      JSON-native conversion or byte encoding.
    * ``json_default`` lets the standard-library ``json`` module encode
      envelopes found anywhere inside a larger structure.

Layer:
    adapters/serialization
"""

from __future__ import annotations

from typing import Any, assert_never

from pydantic_core import PydanticSerializationError, to_json, to_jsonable_python

from jsend.config.settings import get_settings
from jsend.domain.entities.envelope import Envelope
from jsend.domain.enums.status import Status
from jsend.infrastructure.logging.logger import get_json_logger

__all__ = ["render", "to_jsonable", "render_json", "json_default"]

_LOGGER = get_json_logger(__name__)


def _fail_data(envelope: Envelope[Any]) -> dict[str, Any]:
    """Build the ``data`` object of a fail response (always an object)."""
    if envelope.message is not None:
        return {"message": envelope.message}
    return dict(envelope.reasons_or_empty())


def render(envelope: Envelope[Any]) -> dict[str, Any]:
    """Render ``envelope`` into its JSend object.

    Args:
        envelope: Envelope to render.

    Returns:
        dict[str, Any]: Fresh mapping; payload values are passed through as-is.
    """
    status = envelope.status
    payload: dict[str, Any] = {"status": status.value}

    if status is Status.SUCCESS:
        payload["data"] = dict(envelope.data) if envelope.data is not None else {}
    elif status is Status.FAIL:
        payload["data"] = _fail_data(envelope)
    elif status is Status.ERROR:
        payload["message"] = envelope.message
        if envelope.code is not None:
            payload["code"] = envelope.code
        if envelope.error_data:
            payload["data"] = dict(envelope.error_data)
    else:
        assert_never(status)

    _LOGGER.debug("jsend_rendered", extra={"extra": {"status": status.value}})
    return payload


def to_jsonable(envelope: Envelope[Any]) -> dict[str, Any]:
    """Render ``envelope`` and convert every payload value to a JSON-native type.

    Raises:
        PydanticSerializationError: If a payload value cannot be serialized.
            The backend's exception is re-raised unchanged.
    """
    payload = render(envelope)
    try:
        return to_jsonable_python(payload)
    except PydanticSerializationError as exc:
        _log_serialization_failure(envelope, exc)
        raise


def render_json(envelope: Envelope[Any], *, indent: int | None = None) -> bytes:
    """Render ``envelope`` to UTF-8 JSON bytes.

    Args:
        envelope: Envelope to render.
        indent: Indentation width. Defaults to ``Settings.json_indent``.

    Returns:
        bytes: Encoded JSON document.

    Raises:
        PydanticSerializationError: If a payload value cannot be serialized.
            The backend's exception is re-raised unchanged.
    """
    if indent is None:
        indent = get_settings().json_indent
    payload = render(envelope)
    try:
        return to_json(payload, indent=indent)
    except PydanticSerializationError as exc:
        _log_serialization_failure(envelope, exc)
        raise


def json_default(obj: Any) -> Any:
    """``default=`` hook for :func:`json.dumps` that renders envelopes.

    Usage:
        json.dumps({"result": envelope}, default=json_default)

    Raises:
        TypeError: If ``obj`` is not an :class:`Envelope`, matching the
            standard-library contract for ``default`` hooks.
    """
    if isinstance(obj, Envelope):
        return render(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _log_serialization_failure(envelope: Envelope[Any], exc: Exception) -> None:
    _LOGGER.warning(
        "jsend_serialization_failed",
        extra={"extra": {"status": envelope.status.value, "error": str(exc)}},
    )
