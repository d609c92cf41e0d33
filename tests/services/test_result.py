"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from reachctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="reach", data={"root": "app"})
        assert result.ok is True
        assert result.op == "reach"
        assert result.data == {"root": "app"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="GRAPH_NOT_FOUND", message="Not found")
        result = ServiceResult(ok=False, op="reach", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "GRAPH_NOT_FOUND"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("walk", "INVALID_ORDER", "bad order", order="up")
        assert result.ok is False
        assert result.op == "walk"
        assert result.error == ServiceError(
            code="INVALID_ORDER", message="bad order", detail={"order": "up"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="reach",
            data={"items": ["a", "b"]},
            meta={"telemetry": {"name": "x"}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["items"] == ["a", "b"]
        assert parsed["meta"]["telemetry"]["name"] == "x"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="reach")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
