# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Unit tests for the JSend renderer."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

import pytest

from jsend import SerializationFailure
from jsend.adapters.serialization.renderer import (
    json_default,
    render,
    render_json,
    to_jsonable,
)
from jsend.domain.entities.envelope import Envelope, error, fail, success
from jsend.domain.enums.status import Status

# --------------------------------------------------------------------------- #
# Wire shapes
# --------------------------------------------------------------------------- #


def test_render_empty_success_emits_empty_data_object() -> None:
    assert render(success()) == {"status": "success", "data": {}}
    assert render_json(success()) == b'{"status":"success","data":{}}'


@pytest.mark.parametrize(
    ("key", "value"),
    [("user", {"id": 7}), ("count", 3), ("tags", ["a", "b"]), ("flag", False), ("none", None)],
)
def test_render_success_key_value(key: str, value: Any) -> None:
    assert render(success(key, value)) == {"status": "success", "data": {key: value}}


def test_render_success_mapping_preserves_insertion_order() -> None:
    payload = render(success({"z": 1, "a": 2, "m": 3}))

    assert list(payload) == ["status", "data"]
    assert list(payload["data"]) == ["z", "a", "m"]
    assert render_json(success({"z": 1, "a": 2})) == (
        b'{"status":"success","data":{"z":1,"a":2}}'
    )


def test_render_fail_message_is_wrapped_in_data() -> None:
    assert render(fail("oops")) == {"status": "fail", "data": {"message": "oops"}}


def test_render_fail_reasons_are_members_of_data() -> None:
    reasons = {"email": "is required", "age": "must be positive"}

    assert render(fail(reasons)) == {"status": "fail", "data": reasons}
    assert render(fail("email", "is required")) == {
        "status": "fail",
        "data": {"email": "is required"},
    }


def test_render_fail_with_empty_reasons_emits_empty_object() -> None:
    assert render(fail({})) == {"status": "fail", "data": {}}


def test_render_fail_without_message_or_reasons_emits_empty_object() -> None:
    env = Envelope(status=Status.FAIL)

    assert env.message is None and env.reasons is None
    assert render(env) == {"status": "fail", "data": {}}
    assert render_json(env) == b'{"status":"fail","data":{}}'


def test_render_error_with_message_only_has_no_code_or_data() -> None:
    payload = render(error("Database unavailable"))

    assert payload == {"status": "error", "message": "Database unavailable"}
    assert "code" not in payload
    assert "data" not in payload


def test_render_error_with_code_and_data() -> None:
    env = error("m", 42, {"x": 1})

    assert render(env) == {"status": "error", "message": "m", "code": 42, "data": {"x": 1}}
    assert render_json(env) == b'{"status":"error","message":"m","code":42,"data":{"x":1}}'


def test_render_error_omits_empty_error_data_but_keeps_zero_code() -> None:
    assert render(error("m", 0, {})) == {"status": "error", "message": "m", "code": 0}


# --------------------------------------------------------------------------- #
# Purity & determinism
# --------------------------------------------------------------------------- #


def test_render_returns_fresh_plain_dicts() -> None:
    env = success({"a": 1})

    first = render(env)
    first["data"]["a"] = 99

    assert render(env) == {"status": "success", "data": {"a": 1}}
    assert type(first["data"]) is dict


def test_render_json_is_idempotent() -> None:
    env = error("m", 7, {"when": datetime(2025, 1, 1, tzinfo=UTC)})

    assert render_json(env) == render_json(env)


def test_mutating_input_after_construction_does_not_change_output() -> None:
    data: dict[str, Any] = {"a": 1}
    env = success(data)
    before = render_json(env)

    data["b"] = 2

    assert render_json(env) == before


# --------------------------------------------------------------------------- #
# JSON backend
# --------------------------------------------------------------------------- #


def test_to_jsonable_converts_rich_types() -> None:
    env = success(
        {
            "id": UUID("12345678-1234-5678-1234-567812345678"),
            "at": datetime(2025, 1, 1, 12, 0, tzinfo=UTC),
            "price": Decimal("1.50"),
        }
    )

    payload = to_jsonable(env)

    assert payload["data"]["id"] == "12345678-1234-5678-1234-567812345678"
    assert payload["data"]["at"].startswith("2025-01-01T12:00:00")
    assert payload["data"]["price"] == "1.50"
    json.dumps(payload)


def test_render_json_honours_explicit_indent() -> None:
    rendered = render_json(success("a", 1), indent=2)

    assert rendered.startswith(b"{\n  ")
    assert json.loads(rendered) == {"status": "success", "data": {"a": 1}}


def test_render_json_uses_configured_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSEND_JSON_INDENT", "4")

    rendered = render_json(success())

    assert rendered.startswith(b"{\n    ")


@pytest.mark.parametrize("renderer", [to_jsonable, render_json])
def test_unserializable_payload_propagates_backend_error(
    renderer: Any, caplog: pytest.LogCaptureFixture
) -> None:
    env = error("m", None, {"obj": object()})

    with caplog.at_level(logging.WARNING), pytest.raises(SerializationFailure):
        renderer(env)

    assert any(r.getMessage() == "jsend_serialization_failed" for r in caplog.records)


def test_render_itself_does_not_touch_payload_values() -> None:
    marker = object()

    assert render(success("obj", marker))["data"]["obj"] is marker


# --------------------------------------------------------------------------- #
# Standard-library boundary
# --------------------------------------------------------------------------- #


def test_json_default_renders_nested_envelopes() -> None:
    document = {"results": [success("a", 1), fail("bad")]}

    encoded = json.dumps(document, default=json_default, separators=(",", ":"))

    assert json.loads(encoded) == {
        "results": [
            {"status": "success", "data": {"a": 1}},
            {"status": "fail", "data": {"message": "bad"}},
        ]
    }


def test_json_default_rejects_other_objects() -> None:
    with pytest.raises(TypeError, match="Object of type object is not JSON serializable"):
        json.dumps({"x": object()}, default=json_default)
