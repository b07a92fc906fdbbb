# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Domain exceptions."""

from jsend.domain.exceptions.base import InvalidArgumentError, JSendError, SerializationFailure

__all__ = ["InvalidArgumentError", "JSendError", "SerializationFailure"]
