"""pytest fixtures shared across all tests."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from vexclient.core.config import Settings
from vexclient.core.console import ConsoleResponse
from vexclient.core.exception_client import ExceptionClient
from vexclient.models.vuln_exception import Reason, Scope, VulnException


class FakeConsole:
    """Records every request and answers from a queue of canned responses.

    With an empty queue every request succeeds with no attributes.
    """

    def __init__(self) -> None:
        self.requests: list[tuple[ET.Element, str]] = []
        self.responses: list[ConsoleResponse] = []

    def reply(self, response: ConsoleResponse) -> None:
        self.responses.append(response)

    def execute(self, request: ET.Element, version: str) -> ConsoleResponse:
        self.requests.append((request, version))
        if self.responses:
            return self.responses.pop(0)
        return ConsoleResponse(success=True)

    @property
    def last(self) -> ET.Element:
        return self.requests[-1][0]


@pytest.fixture
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def client(console, settings) -> ExceptionClient:
    return ExceptionClient(console, settings)


@pytest.fixture
def instance_exception() -> VulnException:
    """Specific-instance exception for vuln-123 on asset 42, port 443."""
    return VulnException(
        "vuln-123",
        Scope.SPECIFIC_INSTANCE_OF_SPECIFIC_ASSET,
        Reason.FALSE_POSITIVE,
        asset_id=42,
        port=443,
    )
