"""Tests for the `vex` command line."""

import pytest
from click.testing import CliRunner

from vexclient.cli.main import cli

LISTING = """<?xml version="1.0" encoding="UTF-8"?>
<VulnerabilityExceptionListingResponse success="1">
  <VulnerabilityExceptionSummary>
    <VulnerabilityException exception-id="101" vuln-id="a" scope="All Instances"
        reason="Other" status="Approved"/>
    <VulnerabilityException exception-id="202" vuln-id="b" scope="All Instances"
        reason="Other" status="Rejected"/>
  </VulnerabilityExceptionSummary>
</VulnerabilityExceptionListingResponse>
"""


@pytest.fixture
def runner():
    return CliRunner(env={"COLUMNS": "200"})


def test_create_request_preview(runner):
    result = runner.invoke(cli, [
        "request", "create",
        "--vuln-id", "vuln-123",
        "--scope", "Specific Instance of Specific Asset",
        "--reason", "False Positive",
        "--asset-id", "42",
        "--port", "443",
    ])
    assert result.exit_code == 0, result.output
    assert "VulnerabilityExceptionCreateRequest" in result.output
    assert 'device-id="42"' in result.output
    assert 'port-no="443"' in result.output
    assert "vuln-key" not in result.output
    assert "protocol version 1.2" in result.output


def test_create_request_invalid(runner):
    result = runner.invoke(cli, [
        "request", "create",
        "--vuln-id", "vuln-123",
        "--scope", "Specific Instance of Specific Asset",
        "--reason", "False Positive",
        "--asset-id", "42",
    ])
    assert result.exit_code == 1
    assert "Port or vuln_key is required" in result.output


def test_expire_request_preview(runner):
    result = runner.invoke(cli, ["request", "expire", "--id", "7", "--date", "2027-12-31"])
    assert result.exit_code == 0, result.output
    assert 'expiration-date="2027-12-31"' in result.output


def test_comment_request_preview(runner):
    result = runner.invoke(cli, ["request", "comment", "--id", "7", "--comment", "hi", "--reviewer"])
    assert result.exit_code == 0, result.output
    assert "<reviewer-comment>hi</reviewer-comment>" in result.output


def test_parse_listing_file(runner, tmp_path):
    path = tmp_path / "listing.xml"
    path.write_text(LISTING)
    result = runner.invoke(cli, ["parse", str(path)])
    assert result.exit_code == 0, result.output
    assert "Vulnerability exceptions (2)" in result.output
    assert "101" in result.output and "202" in result.output


def test_parse_listing_file_filtered(runner, tmp_path):
    path = tmp_path / "listing.xml"
    path.write_text(LISTING)
    result = runner.invoke(cli, ["parse", str(path), "--status", "Rejected"])
    assert result.exit_code == 0, result.output
    assert "Vulnerability exceptions (1)" in result.output
    assert "202" in result.output
    assert "101" not in result.output


def test_parse_failure_response(runner, tmp_path):
    path = tmp_path / "failed.xml"
    path.write_text(
        '<VulnerabilityExceptionListingResponse success="0"><Failure><message>'
        "Session expired</message></Failure></VulnerabilityExceptionListingResponse>"
    )
    result = runner.invoke(cli, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Session expired" in result.output
