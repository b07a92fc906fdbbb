# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Domain enumerations."""

from jsend.domain.enums.status import Status

__all__ = ["Status"]
