"""Installment audit service - detects and repairs double-period drift."""

from dataclasses import replace

import structlog

from src.domain.exceptions import DataAccessException
from src.domain.interfaces import ContractRepository
from src.application.dto import AuditReport, CorrectionFailure
from src.service.billing import (
    AuditFinding,
    BillingSettings,
    billing_settings,
    classify_installments,
)

logger = structlog.get_logger(__name__)


class InstallmentAuditService:
    """
    Batch audit of every contract's first two installments.

    Contracts are scanned sequentially so the audit log order is
    deterministic and the data store sees one request at a time. In apply
    mode each flagged installment gets exactly one write; a failed write is
    logged and the batch moves on.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        settings: BillingSettings = billing_settings,
    ):
        self._contract_repo = contract_repository
        self._settings = settings

    async def run(self, apply: bool = False) -> AuditReport:
        """
        Scan all contracts and optionally correct flagged installments.

        Args:
            apply: Write corrections when True; report only when False

        Returns:
            AuditReport with scanned/flagged/corrected/failed counts

        Raises:
            DataAccessException: If contracts or installments cannot be read
        """
        log = logger.bind(mode="apply" if apply else "dry_run")
        log.info("audit_started")

        report = AuditReport(applied=apply)
        contracts = await self._contract_repo.get_all_contracts()

        for contract in contracts:
            report.contracts_scanned += 1
            installments = await self._contract_repo.get_installments(contract.id)

            finding = classify_installments(contract, installments, self._settings)
            if finding is None:
                continue

            plan_name = await self._contract_repo.get_plan_name(contract.plan_id)
            finding = replace(finding, plan_name=plan_name or "Unknown")
            report.findings.append(finding)

            log.info(
                "installment_flagged",
                contract_id=finding.contract_id,
                contract_number=finding.contract_number,
                plan_name=finding.plan_name,
                billing_period=finding.billing_period.value,
                old_due_date=finding.current_due_date.isoformat(),
                new_due_date=finding.correct_due_date.isoformat(),
            )

        if apply:
            for finding in report.findings:
                await self._correct(finding, report)

        log.info("audit_completed", **report.to_dict())

        return report

    async def _correct(self, finding: AuditFinding, report: AuditReport) -> None:
        try:
            await self._contract_repo.update_installment_due_date(
                finding.installment_id,
                finding.correct_due_date,
            )
        except DataAccessException as exc:
            logger.error(
                "installment_correction_failed",
                contract_id=finding.contract_id,
                contract_number=finding.contract_number,
                installment_id=finding.installment_id,
                code=exc.code,
                error=exc.message,
            )
            report.failures.append(CorrectionFailure(finding=finding, error=exc.message))
            return

        logger.info(
            "installment_corrected",
            contract_number=finding.contract_number,
            installment_number=finding.installment_number,
            due_date=finding.correct_due_date.isoformat(),
        )
        report.corrected.append(finding)
