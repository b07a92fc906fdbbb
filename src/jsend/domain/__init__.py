# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Domain layer: the JSend envelope, its status and its errors (no I/O)."""
