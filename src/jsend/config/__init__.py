# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Configuration package."""

from jsend.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
