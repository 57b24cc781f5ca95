"""Vulnerability exception record and its closed vocabularies.

Certain fields are necessary for some exception scopes even though they are
optional otherwise:

* An exception for all instances of a vulnerability on all assets only needs
  ``vuln_id``. ``asset_id``, ``port`` and ``vuln_key`` are ignored.
* An exception for all instances on a specific asset needs ``vuln_id`` and
  ``asset_id``. ``port`` and ``vuln_key`` are ignored.
* An exception for a specific instance on a specific asset needs ``vuln_id``
  and ``asset_id``, plus ``port`` and/or ``vuln_key``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """State of an exception in the review workflow."""

    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    DELETED = "Deleted"


class Reason(str, Enum):
    FALSE_POSITIVE = "False Positive"
    COMPENSATING_CONTROL = "Compensating Control"
    ACCEPTABLE_USE = "Acceptable Use"
    ACCEPTABLE_RISK = "Acceptable Risk"
    OTHER = "Other"


class Scope(str, Enum):
    """Breadth of suppression: global, per asset, per site or per instance."""

    ALL_INSTANCES = "All Instances"
    ALL_INSTANCES_ON_A_SPECIFIC_ASSET = "All Instances on a Specific Asset"
    ALL_INSTANCES_IN_A_SPECIFIC_SITE = "All Instances in a Specific Site"
    SPECIFIC_INSTANCE_OF_SPECIFIC_ASSET = "Specific Instance of Specific Asset"


@dataclass(eq=True)
class VulnException:
    """One vulnerability exception, owned and mutated by the caller.

    ``scope`` and ``reason`` accept raw strings so records built from user
    input or unfamiliar console responses can still be represented; the
    validator coerces them before anything is sent.
    """

    vuln_id: str | None
    scope: Scope | str | None
    reason: Reason | str | None
    status: Status | None = None

    # id, asset_id and port hold the raw string when the console sends a
    # non-numeric value
    id: int | str | None = None         # assigned by the console on create
    submitter: str | None = None        # read-only, set by the console
    reviewer: str | None = None         # read-only, set by the console
    asset_id: int | str | None = None
    port: int | str | None = None
    vuln_key: str | None = None         # vulnerable component: file, account, program
    expiration: str | None = None       # YYYY-MM-DD, kept as the console sends it
    submitter_comment: str | None = None
    reviewer_comment: str | None = None

    @property
    def device_id(self) -> int | str | None:
        return self.asset_id

    @device_id.setter
    def device_id(self, value: int | str | None) -> None:
        self.asset_id = value


@dataclass(frozen=True)
class ExceptionDraft:
    """Validated, normalized payload of a create request.

    Only the fields meaningful for ``scope`` are set; the others are ``None``.
    """

    vuln_id: str
    scope: Scope
    reason: Reason
    asset_id: int | None = None
    port: int | None = None
    vuln_key: str | None = None
    comment: str | None = None
