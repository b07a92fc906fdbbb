# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""JSend wire-format rendering."""

from jsend.adapters.serialization.renderer import json_default, render, render_json, to_jsonable

__all__ = ["json_default", "render", "render_json", "to_jsonable"]
