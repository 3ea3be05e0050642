"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from graphpoet.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="compose", data={"poem": "Test of the system."})
        assert result.ok is True
        assert result.op == "compose"
        assert result.data == {"poem": "Test of the system."}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("compose", "NO_CORPUS", "No corpus", path="x.txt")
        assert result.ok is False
        assert result.error == ServiceError(
            code="NO_CORPUS", message="No corpus", detail={"path": "x.txt"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="graph_stats", data={"edges": 3}, meta={"k": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["edges"] == 3
        assert parsed["meta"]["k"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
