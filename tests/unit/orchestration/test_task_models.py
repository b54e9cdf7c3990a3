"""Tests for task request/response models"""
import pytest

from taskforge.orchestration.models import (
    NO_WORKER_ERROR,
    InvalidTaskError,
    Priority,
    TaskCategory,
    TaskRequest,
    TaskResponse,
)


def test_from_dict_parses_wire_request():
    request = TaskRequest.from_dict(
        {
            "type": "code-generation",
            "projectId": "proj_1",
            "requirements": "Build a login form",
            "priority": "high",
            "context": {"framework": "next"},
        }
    )

    assert request.category is TaskCategory.CODE_GENERATION
    assert request.priority is Priority.HIGH
    assert request.project_id == "proj_1"
    assert request.context == {"framework": "next"}
    assert request.label == "code-generation"


def test_from_dict_keeps_unknown_category_as_string():
    request = TaskRequest.from_dict(
        {"type": "image-generation", "projectId": "p", "requirements": "a cat", "priority": "low"}
    )

    assert request.category == "image-generation"
    assert request.label == "image-generation"


def test_from_dict_defaults_priority():
    request = TaskRequest.from_dict({"type": "analysis", "projectId": "p", "requirements": "x"})

    assert request.priority is Priority.MEDIUM
    assert request.context is None


@pytest.mark.parametrize(
    "payload",
    [
        {"projectId": "p", "requirements": "x"},
        {"type": "", "projectId": "p", "requirements": "x"},
        {"type": 3, "projectId": "p", "requirements": "x"},
        {"type": "analysis", "projectId": "p"},
        {"type": "analysis", "requirements": "x"},
        {"type": "analysis", "projectId": "p", "requirements": "x", "priority": "asap"},
    ],
)
def test_from_dict_rejects_malformed(payload):
    with pytest.raises(InvalidTaskError):
        TaskRequest.from_dict(payload)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        TaskRequest.from_dict(["analysis"])


def test_request_to_dict():
    request = TaskRequest(category=TaskCategory.TESTING, requirements="cover cart", project_id="p")

    assert request.to_dict() == {
        "type": "testing",
        "projectId": "p",
        "requirements": "cover cart",
        "priority": "medium",
    }


def test_no_worker_response():
    response = TaskResponse.no_worker()

    assert response.to_dict() == {
        "success": False,
        "error": NO_WORKER_ERROR,
        "executionTime": 0.0,
        "agentId": "",
    }


def test_failure_response():
    response = TaskResponse.failure("worker_api_4", "boom")

    assert response.to_dict() == {
        "success": False,
        "error": "boom",
        "executionTime": 0.0,
        "agentId": "worker_api_4",
    }


def test_success_response_to_dict():
    response = TaskResponse(
        success=True,
        agent_id="worker_api_4",
        execution_time_ms=12.5,
        data={"files": []},
        recommendations=["Add types"],
    )

    data = response.to_dict()

    assert data["success"] is True
    assert data["data"] == {"files": []}
    assert data["executionTime"] == 12.5
    assert data["agentId"] == "worker_api_4"
    assert data["recommendations"] == ["Add types"]
    assert "error" not in data
