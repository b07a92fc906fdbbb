# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Typed JSend response envelopes.

Typical usage:
    from jsend import fail, render_json, success

    render_json(success("user", {"id": 7}))
    # b'{"status":"success","data":{"user":{"id":7}}}'

    render_json(fail({"email": "is required"}))
    # b'{"status":"fail","data":{"email":"is required"}}'
"""

from __future__ import annotations

from jsend.adapters.serialization.renderer import json_default, render, render_json, to_jsonable
from jsend.domain.entities.envelope import Envelope, error, fail, success
from jsend.domain.enums.status import Status
from jsend.domain.exceptions.base import InvalidArgumentError, JSendError, SerializationFailure

__all__ = [
    "Envelope",
    "InvalidArgumentError",
    "JSendError",
    "SerializationFailure",
    "Status",
    "error",
    "fail",
    "json_default",
    "render",
    "render_json",
    "success",
    "to_jsonable",
]

__version__ = "1.0.0"
