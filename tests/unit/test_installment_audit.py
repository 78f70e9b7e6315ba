"""
Unit tests for the installment date audit.

These tests verify:
1. Double-period drift classification
2. Dry-run vs apply behaviour of InstallmentAuditService
3. Per-installment failure isolation
4. CLI report rendering and exit codes
"""

import pytest
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional

from src.application.dto import AuditReport, CorrectionFailure
from src.application.services import InstallmentAuditService
from src.cli import fix_installment_dates as cli
from src.domain.entities import (
    BillingCadence,
    Contract,
    Installment,
    InstallmentStatus,
)
from src.domain.exceptions import DataAccessException
from src.domain.interfaces import ContractRepository
from src.service.billing import classify_installments


# =============================================================================
# Fakes
# =============================================================================

class InMemoryContractRepository(ContractRepository):
    """Contract store backed by dicts; records every due date write."""

    def __init__(
        self,
        contracts: List[Contract],
        installments: List[Installment],
        plans: Optional[Dict[str, str]] = None,
        failing_installments: Optional[set] = None,
    ):
        self.contracts = {c.id: c for c in contracts}
        self.installments = {i.id: i for i in installments}
        self.plans = plans or {}
        self.failing_installments = failing_installments or set()
        self.writes = []

    async def get_all_contracts(self) -> List[Contract]:
        return sorted(self.contracts.values(), key=lambda c: c.contract_number)

    async def get_contract(self, contract_id: str) -> Optional[Contract]:
        return self.contracts.get(contract_id)

    async def get_installments(self, contract_id: str) -> List[Installment]:
        return [i for i in self.installments.values() if i.contract_id == contract_id]

    async def update_installment_due_date(self, installment_id: str, due_date: date) -> None:
        if installment_id in self.failing_installments:
            raise DataAccessException("update_installment_due_date", "connection reset")
        self.writes.append((installment_id, due_date))
        self.installments[installment_id] = replace(
            self.installments[installment_id], due_date=due_date
        )

    async def get_plan_name(self, plan_id: str) -> Optional[str]:
        return self.plans.get(plan_id)


def make_contract(
    number: str,
    start: date,
    cadence: BillingCadence = BillingCadence.MONTHLY,
    plan_id: str = "plan-basic",
) -> Contract:
    return Contract(
        contract_number=number,
        plan_id=plan_id,
        original_start_date=start,
        billing_period=cadence,
        last_paid_date=start,
        payment_approved=True,
        monthly_amount_cents=4990,
    )


def make_installments(
    contract: Contract,
    first_due: date,
    second_due: date,
    second_status: InstallmentStatus = InstallmentStatus.PENDING,
) -> List[Installment]:
    return [
        Installment(
            contract_id=contract.id,
            installment_number=1,
            due_date=first_due,
            status=InstallmentStatus.PAID,
        ),
        Installment(
            contract_id=contract.id,
            installment_number=2,
            due_date=second_due,
            status=second_status,
        ),
    ]


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassifyInstallments:

    def test_double_period_is_flagged(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(contract, date(2024, 1, 15), date(2024, 3, 15))

        finding = classify_installments(contract, installments)

        assert finding is not None
        assert finding.current_due_date == date(2024, 3, 15)
        assert finding.correct_due_date == date(2024, 2, 15)
        assert finding.installment_id == installments[1].id
        assert finding.first_installment_id == installments[0].id

    def test_correct_schedule_is_clean(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(contract, date(2024, 1, 15), date(2024, 2, 15))

        assert classify_installments(contract, installments) is None

    def test_paid_second_installment_is_never_touched(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(
            contract,
            date(2024, 1, 15),
            date(2024, 3, 15),
            second_status=InstallmentStatus.PAID,
        )

        assert classify_installments(contract, installments) is None

    def test_current_status_is_correctable(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(
            contract,
            date(2024, 1, 15),
            date(2024, 3, 15),
            second_status=InstallmentStatus.CURRENT,
        )

        assert classify_installments(contract, installments) is not None

    def test_tolerance_of_one_day(self):
        contract = make_contract("PP-1", date(2024, 1, 15))

        assert classify_installments(
            contract, make_installments(contract, date(2024, 1, 15), date(2024, 3, 16))
        ) is not None
        assert classify_installments(
            contract, make_installments(contract, date(2024, 1, 15), date(2024, 3, 18))
        ) is None

    def test_single_installment_is_clean(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(contract, date(2024, 1, 15), date(2024, 3, 15))[:1]

        assert classify_installments(contract, installments) is None

    def test_annual_drift(self):
        contract = make_contract("PP-1", date(2023, 6, 1), cadence=BillingCadence.ANNUAL)
        installments = make_installments(contract, date(2023, 6, 1), date(2025, 6, 1))

        finding = classify_installments(contract, installments)

        assert finding is not None
        assert finding.correct_due_date == date(2024, 6, 1)

    def test_input_order_does_not_matter(self):
        contract = make_contract("PP-1", date(2024, 1, 15))
        installments = make_installments(contract, date(2024, 1, 15), date(2024, 3, 15))

        finding = classify_installments(contract, list(reversed(installments)))

        assert finding.installment_number == 2


# =============================================================================
# Audit Service Tests
# =============================================================================

@pytest.fixture
def repository() -> InMemoryContractRepository:
    drifted = make_contract("PP-0001", date(2024, 1, 15))
    clean = make_contract("PP-0002", date(2024, 1, 31))
    return InMemoryContractRepository(
        contracts=[drifted, clean],
        installments=(
            make_installments(drifted, date(2024, 1, 15), date(2024, 3, 15))
            + make_installments(clean, date(2024, 1, 31), date(2024, 2, 29))
        ),
        plans={"plan-basic": "Basic"},
    )


class TestInstallmentAuditService:

    @pytest.mark.asyncio
    async def test_dry_run_reports_without_writing(self, repository):
        report = await InstallmentAuditService(repository).run(apply=False)

        assert report.applied is False
        assert report.contracts_scanned == 2
        assert report.contracts_flagged == 1
        assert report.contracts_corrected == 0
        assert report.findings[0].contract_number == "PP-0001"
        assert report.findings[0].plan_name == "Basic"
        assert repository.writes == []

    @pytest.mark.asyncio
    async def test_apply_writes_one_correction(self, repository):
        report = await InstallmentAuditService(repository).run(apply=True)

        finding = report.findings[0]
        assert report.contracts_corrected == 1
        assert repository.writes == [(finding.installment_id, date(2024, 2, 15))]
        assert repository.installments[finding.installment_id].due_date == date(2024, 2, 15)

    @pytest.mark.asyncio
    async def test_second_apply_is_a_no_op(self, repository):
        service = InstallmentAuditService(repository)

        await service.run(apply=True)
        second = await service.run(apply=True)

        assert second.contracts_flagged == 0
        assert len(repository.writes) == 1

    @pytest.mark.asyncio
    async def test_failed_write_does_not_stop_the_batch(self):
        first = make_contract("PP-0001", date(2024, 1, 15))
        second = make_contract("PP-0002", date(2024, 1, 10))
        first_installments = make_installments(first, date(2024, 1, 15), date(2024, 3, 15))
        second_installments = make_installments(second, date(2024, 1, 10), date(2024, 3, 10))
        repository = InMemoryContractRepository(
            contracts=[first, second],
            installments=first_installments + second_installments,
            failing_installments={first_installments[1].id},
        )

        report = await InstallmentAuditService(repository).run(apply=True)

        assert report.contracts_flagged == 2
        assert report.contracts_failed == 1
        assert report.contracts_corrected == 1
        assert report.failures[0].finding.contract_number == "PP-0001"
        assert "connection reset" in report.failures[0].error
        assert repository.writes == [(second_installments[1].id, date(2024, 2, 10))]

    @pytest.mark.asyncio
    async def test_unknown_plan_name(self):
        contract = make_contract("PP-0001", date(2024, 1, 15), plan_id="missing")
        repository = InMemoryContractRepository(
            contracts=[contract],
            installments=make_installments(contract, date(2024, 1, 15), date(2024, 3, 15)),
        )

        report = await InstallmentAuditService(repository).run()

        assert report.findings[0].plan_name == "Unknown"


# =============================================================================
# CLI Tests
# =============================================================================

class TestCli:

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)

    @pytest.fixture
    def finding(self):
        contract = make_contract("PP-0001", date(2024, 1, 15))
        found = classify_installments(
            contract,
            make_installments(contract, date(2024, 1, 15), date(2024, 3, 15)),
        )
        return replace(found, plan_name="Basic")

    def test_render_dry_run(self, finding):
        report = AuditReport(applied=False, contracts_scanned=3, findings=[finding])

        output = "\n".join(cli.render_report(report))

        assert "DRY RUN" in output
        assert "[FLAGGED] PP-0001 (Basic, monthly)" in output
        assert "2024-03-15 -> 2024-02-15" in output
        assert "Contracts scanned:   3" in output
        assert "--apply" in output

    def test_render_apply_with_failure(self, finding):
        report = AuditReport(
            applied=True,
            contracts_scanned=1,
            findings=[finding],
            failures=[CorrectionFailure(finding=finding, error="boom")],
        )

        output = "\n".join(cli.render_report(report))

        assert "[FAILED] PP-0001" in output
        assert "Corrections failed:  1" in output
        assert "Dry run" not in output

    def test_main_prints_report(self, monkeypatch, capsys, finding):
        calls = []

        async def fake_run_audit(apply, database_url=None):
            calls.append((apply, database_url))
            return AuditReport(
                applied=apply, contracts_scanned=1, findings=[finding], corrected=[finding]
            )

        monkeypatch.setattr(cli, "run_audit", fake_run_audit)

        exit_code = cli.main(["--apply", "--database-url", "sqlite:///audit.db"])

        assert exit_code == 0
        assert calls == [(True, "sqlite:///audit.db")]
        assert "[FIXED] PP-0001" in capsys.readouterr().out

    def test_main_returns_1_on_fatal_error(self, monkeypatch, capsys):
        async def broken_run_audit(apply, database_url=None):
            raise DataAccessException("get_all_contracts", "database is down")

        monkeypatch.setattr(cli, "run_audit", broken_run_audit)

        exit_code = cli.main([])

        assert exit_code == 1
        assert "database is down" in capsys.readouterr().err
