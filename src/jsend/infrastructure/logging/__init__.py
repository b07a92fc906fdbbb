# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Structured logging."""

from jsend.infrastructure.logging.logger import configure_root_logging, get_json_logger

__all__ = ["configure_root_logging", "get_json_logger"]
