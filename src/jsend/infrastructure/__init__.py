# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Infrastructure layer: logging."""
