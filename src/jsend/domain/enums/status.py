# src/jsend/domain/enums/status.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""
JSend status enumeration.

Purpose:
    Closed set of top-level JSend statuses. The enum value is the exact
    lowercase token written to the ``status`` member on the wire.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Status"]


class Status(str, Enum):
    """JSend response status.

    ``SUCCESS`` carries payload data, ``FAIL`` carries validation reasons or a
    general failure message, and ``ERROR`` carries a mandatory error message.
    """

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value
