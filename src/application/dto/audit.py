"""Data transfer objects for the installment date audit."""

from dataclasses import dataclass, field
from typing import List

from src.service.billing import AuditFinding


@dataclass(frozen=True)
class CorrectionFailure:
    """A flagged installment whose correction could not be written."""
    finding: AuditFinding
    error: str


@dataclass
class AuditReport:
    """Outcome of one audit run over every contract."""

    applied: bool
    contracts_scanned: int = 0
    findings: List[AuditFinding] = field(default_factory=list)
    corrected: List[AuditFinding] = field(default_factory=list)
    failures: List[CorrectionFailure] = field(default_factory=list)

    @property
    def contracts_flagged(self) -> int:
        return len(self.findings)

    @property
    def contracts_corrected(self) -> int:
        return len(self.corrected)

    @property
    def contracts_failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> dict:
        return {
            "applied": self.applied,
            "contracts_scanned": self.contracts_scanned,
            "contracts_flagged": self.contracts_flagged,
            "contracts_corrected": self.contracts_corrected,
            "contracts_failed": self.contracts_failed,
        }
