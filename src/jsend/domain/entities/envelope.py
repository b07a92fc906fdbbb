# src/jsend/domain/entities/envelope.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""
JSend Envelope Entity

Purpose:
    Immutable in-memory representation of one JSend response prior to
    serialization. Exactly one status is active per envelope, and only the
    fields legal for that status are ever populated.

Design:
    - Frozen, slotted dataclass; invariants are enforced in ``__post_init__`` so
      that direct construction cannot produce an illegal field combination.
    - Caller-supplied mappings are shallow-copied and wrapped in
      ``MappingProxyType``; later mutation of the caller's mapping is not
      observable through the envelope.
    - Named constructors (``success``, ``fail``, ``error``) select the
      status-specific case from the arity and kind of their arguments.

Layer:
    domain/entities
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from jsend.domain.enums.status import Status
from jsend.domain.exceptions.base import InvalidArgumentError

__all__ = ["Envelope", "success", "fail", "error"]

# Marks an omitted positional argument; ``None`` is a real (rejected) value.
_MISSING: Final[Any] = object()

_EMPTY: Final[Mapping[str, Any]] = MappingProxyType({})


def _require_key(key: Any) -> Any:
    """Return ``key`` if it can be used as a mapping key.

    Raises:
        InvalidArgumentError: If ``key`` is unhashable.
    """
    try:
        hash(key)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"key must be hashable, got {type(key).__name__}.", field="key"
        ) from exc
    return key


def _freeze(
    mapping: Any,
    *,
    field: str,
    allow_none_values: bool = True,
) -> Mapping[str, Any]:
    """Return a read-only shallow copy of ``mapping``.

    Args:
        mapping: Caller-supplied mapping.
        field: Argument name used in error details.
        allow_none_values: Whether ``None`` values are accepted.

    Returns:
        Mapping[str, Any]: ``MappingProxyType`` over a private ``dict`` copy.

    Raises:
        InvalidArgumentError: If ``mapping`` is not a mapping, or holds a
            ``None`` key (or a ``None`` value when ``allow_none_values`` is False).
    """
    if not isinstance(mapping, Mapping):
        raise InvalidArgumentError(
            f"{field} must be a mapping, got {type(mapping).__name__}.", field=field
        )
    copied = dict(mapping)
    if any(key is None for key in copied):
        raise InvalidArgumentError(f"{field} keys cannot be null.", field=field)
    if not allow_none_values and any(value is None for value in copied.values()):
        raise InvalidArgumentError(f"{field} values cannot be null.", field=field)
    return MappingProxyType(copied)


@dataclass(frozen=True, slots=True)
class Envelope[T]:
    """JSend envelope.

    Prefer the named constructors over direct instantiation:

        Envelope.success({"user": user})
        Envelope.fail({"email": "is required"})
        Envelope.error("Database unavailable", 503)

    Args:
        status: Active JSend status.
        data: Success payload. An empty mapping is distinct from ``None``.
        reasons: Fail reasons keyed by field name.
        message: Fail narrative, or the mandatory error message.
        code: Application-defined error code (error only).
        error_data: Auxiliary diagnostic payload (error only).

    Raises:
        InvalidArgumentError: If a field is set that the status does not allow,
            or a field the status requires is missing.
    """

    status: Status
    data: Mapping[str, T] | None = None
    reasons: Mapping[str, str] | None = None
    message: str | None = None
    code: int | None = None
    error_data: Mapping[str, Any] | None = None

    # Envelopes compare by value but are never hashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        try:
            status = Status(self.status)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown JSend status: {self.status!r}.", field="status"
            ) from exc
        object.__setattr__(self, "status", status)

        if status is Status.SUCCESS:
            if self.data is None:
                raise InvalidArgumentError(
                    "Data map cannot be null for success response.", field="data"
                )
            self._reject_fields(("reasons", "message", "code", "error_data"))
        elif status is Status.FAIL:
            self._reject_fields(("data", "code", "error_data"))
            if self.message is not None and self.reasons is not None:
                raise InvalidArgumentError(
                    "Fail response carries either a message or reasons, not both.",
                    field="reasons",
                )
        else:
            if self.message is None:
                raise InvalidArgumentError("Error message cannot be null.", field="message")
            self._reject_fields(("data", "reasons"))

        if self.data is not None:
            object.__setattr__(self, "data", _freeze(self.data, field="data"))
        if self.reasons is not None:
            object.__setattr__(
                self,
                "reasons",
                _freeze(self.reasons, field="reasons", allow_none_values=False),
            )
        if self.error_data is not None:
            object.__setattr__(self, "error_data", _freeze(self.error_data, field="error_data"))

    def _reject_fields(self, names: Iterable[str]) -> None:
        for name in names:
            if getattr(self, name) is not None:
                raise InvalidArgumentError(
                    f"{name} is not allowed on a {self.status} response.", field=name
                )

    # ------------------------------------------------------------------ #
    # Named constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def success(
        cls,
        key_or_data: str | Mapping[str, T] | Any = _MISSING,
        value: T | Any = _MISSING,
        /,
    ) -> Envelope[T]:
        """Build a success envelope.

        Forms:
            ``success()`` -> ``data == {}``
            ``success(key, value)`` -> ``data == {key: value}``
            ``success(mapping)`` -> ``data`` is a read-only copy of ``mapping``

        Raises:
            InvalidArgumentError: If the key or mapping is ``None``, or the single
                argument is not a mapping.
        """
        if value is not _MISSING:
            if key_or_data is None:
                raise InvalidArgumentError(
                    "Data key cannot be null for success response.", field="key"
                )
            return cls(status=Status.SUCCESS, data={_require_key(key_or_data): value})
        if key_or_data is _MISSING:
            return cls(status=Status.SUCCESS, data=_EMPTY)
        if key_or_data is None:
            raise InvalidArgumentError(
                "Data map cannot be null for success response.", field="data"
            )
        return cls(status=Status.SUCCESS, data=key_or_data)

    @classmethod
    def fail(
        cls,
        message_or_key: str | Mapping[str, str] | Any = _MISSING,
        reason: str | Any = _MISSING,
        /,
    ) -> Envelope[T]:
        """Build a fail envelope.

        Forms:
            ``fail(message)`` -> rendered as ``data == {"message": message}``
            ``fail(key, reason)`` -> ``reasons == {key: reason}``
            ``fail(mapping)`` -> ``reasons`` is a read-only copy of ``mapping``

        Raises:
            InvalidArgumentError: If any supplied argument is ``None`` or of the
                wrong kind.
        """
        if reason is not _MISSING:
            if message_or_key is None:
                raise InvalidArgumentError(
                    "Reason key cannot be null for fail response.", field="key"
                )
            if reason is None:
                raise InvalidArgumentError(
                    "Reason cannot be null for fail response.", field="reason"
                )
            return cls(status=Status.FAIL, reasons={_require_key(message_or_key): reason})
        if message_or_key is _MISSING or message_or_key is None:
            raise InvalidArgumentError("Fail message cannot be null.", field="message")
        if isinstance(message_or_key, str):
            return cls(status=Status.FAIL, message=message_or_key)
        if isinstance(message_or_key, Mapping):
            return cls(status=Status.FAIL, reasons=message_or_key)
        raise InvalidArgumentError(
            "fail() expects a message, a key and reason, or a reasons mapping; "
            f"got {type(message_or_key).__name__}.",
            field="reasons",
        )

    @classmethod
    def error(
        cls,
        message: str,
        code: int | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Envelope[T]:
        """Build an error envelope.

        Args:
            message: Mandatory error narrative.
            code: Optional application-defined error code.
            data: Optional diagnostic payload, copied when provided.

        Raises:
            InvalidArgumentError: If ``message`` is ``None``.
        """
        if message is None:
            raise InvalidArgumentError("Error message cannot be null.", field="message")
        return cls(status=Status.ERROR, message=message, code=code, error_data=data)

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def is_fail(self) -> bool:
        return self.status is Status.FAIL

    @property
    def is_error(self) -> bool:
        return self.status is Status.ERROR

    def reasons_or_empty(self) -> Mapping[str, str]:
        """Return the fail reasons, or an empty read-only mapping when unset."""
        return self.reasons if self.reasons is not None else _EMPTY


success = Envelope.success
fail = Envelope.fail
error = Envelope.error
