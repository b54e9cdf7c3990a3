"""Tests for the taskforge CLI"""
import json
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from taskforge.cli.main import cli


@pytest.fixture
def runner():
    """Create Click test runner"""
    return CliRunner()


def test_dispatch_json(runner):
    result = runner.invoke(
        cli,
        ["dispatch", "code-generation", "build", "a", "form", "--time-scale", "0", "--json"],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert data["agentId"] == "worker_api_4"
    assert "recommendations" in data


def test_dispatch_repeated_rotates_stats(runner):
    result = runner.invoke(
        cli,
        ["dispatch", "analysis", "audit", "--time-scale", "0", "-n", "3", "--json"],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert len(data) == 3
    assert all(item["success"] for item in data)


def test_dispatch_table_output(runner):
    result = runner.invoke(cli, ["dispatch", "deployment", "ship it", "--time-scale", "0"])

    assert result.exit_code == 0, result.output
    assert "Recommendations" in result.output
    assert "Workers" in result.output


def test_dispatch_unknown_type_fails(runner):
    result = runner.invoke(cli, ["dispatch", "image-generation", "a cat", "--json"])

    assert result.exit_code == 1
    assert "Unknown task type" in result.stdout
    assert "no suitable worker available" in result.stdout


def test_dispatch_invalid_context(runner):
    result = runner.invoke(cli, ["dispatch", "analysis", "x", "--context", "{not json"])

    assert result.exit_code == 2
    assert "Invalid task" in result.output


def test_dispatch_llm_without_key(runner):
    with patch.dict(os.environ, {"HOME": os.environ["HOME"]}, clear=True):
        result = runner.invoke(cli, ["dispatch", "analysis", "x", "-e", "llm"])

    assert result.exit_code == 1
    assert "API_KEY" in result.output


def test_workers_list_json(runner):
    result = runner.invoke(cli, ["workers", "list", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data) == 10
    assert {w["status"] for w in data} == {"idle"}


def test_workers_list_by_category(runner):
    result = runner.invoke(cli, ["workers", "list", "--category", "security", "--json"])

    data = json.loads(result.stdout)
    assert [w["id"] for w in data] == ["worker_security_6"]


def test_workers_show_unknown(runner):
    result = runner.invoke(cli, ["workers", "show", "worker_nope"])

    assert result.exit_code == 1
    assert "Unknown worker" in result.output


def test_workers_stats_json(runner):
    result = runner.invoke(cli, ["workers", "stats", "--json"])

    data = json.loads(result.stdout)
    assert data["total"] == 10
    assert data["idle"] == 10
    assert data["avgSuccessRate"] == 100


def test_health(runner):
    result = runner.invoke(cli, ["health"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["status"] == "healthy"
    assert data["executor"] == {"kind": "simulated", "available": True}


def test_config_set_and_show(runner):
    result = runner.invoke(cli, ["config", "set", "simulation.time_scale", "0.5"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["config", "show"])
    data = json.loads(result.stdout)
    assert data["simulation"]["time_scale"] == 0.5
