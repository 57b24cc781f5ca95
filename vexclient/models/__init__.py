from vexclient.models.vuln_exception import (
    ExceptionDraft,
    Reason,
    Scope,
    Status,
    VulnException,
)

__all__ = [
    "ExceptionDraft",
    "Reason",
    "Scope",
    "Status",
    "VulnException",
]
