# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Adapters layer: wire-format rendering of domain envelopes."""
