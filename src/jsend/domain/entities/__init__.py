# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Domain entities."""

from jsend.domain.entities.envelope import Envelope, error, fail, success

__all__ = ["Envelope", "error", "fail", "success"]
