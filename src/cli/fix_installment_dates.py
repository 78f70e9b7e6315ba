"""
Installment date audit and repair.

Finds contracts whose second installment was scheduled two billing periods
after the first instead of one, and moves it back onto the anchored
schedule. Runs as a dry run unless --apply is given.

    python -m src.cli.fix_installment_dates [--apply] [--database-url URL]
"""

import argparse
import asyncio
import sys
import traceback
from typing import List, Optional

import structlog

from src.application.dto import AuditReport
from src.application.services import InstallmentAuditService
from src.core.logging import setup_logging
from src.infrastructure.database import db_manager
from src.infrastructure.repositories import PostgresContractRepository

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fix_installment_dates",
        description="Audit and repair installments scheduled one period too late",
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Write corrections (default: report only)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (default: DATABASE_URL from the environment)",
    )
    return parser


def render_report(report: AuditReport) -> List[str]:
    """Human-readable lines for an audit report."""
    mode = "APPLY" if report.applied else "DRY RUN"
    lines = [f"Installment date audit ({mode})", ""]

    failed_ids = {failure.finding.installment_id for failure in report.failures}

    for finding in report.findings:
        if not report.applied:
            marker = "FLAGGED"
        elif finding.installment_id in failed_ids:
            marker = "FAILED"
        else:
            marker = "FIXED"
        lines.append(
            f"  [{marker}] {finding.contract_number} ({finding.plan_name}, "
            f"{finding.billing_period.value}) installment #{finding.installment_number}: "
            f"{finding.current_due_date.isoformat()} -> {finding.correct_due_date.isoformat()}"
        )

    for failure in report.failures:
        lines.append(f"    {failure.finding.contract_number}: {failure.error}")

    if report.findings:
        lines.append("")

    lines.append(f"Contracts scanned:   {report.contracts_scanned}")
    lines.append(f"Contracts flagged:   {report.contracts_flagged}")

    if report.applied:
        lines.append(f"Contracts corrected: {report.contracts_corrected}")
        lines.append(f"Corrections failed:  {report.contracts_failed}")
    elif report.findings:
        lines.append("")
        lines.append("Dry run: no changes written. Re-run with --apply to correct.")

    return lines


async def run_audit(apply: bool, database_url: Optional[str] = None) -> AuditReport:
    """Run one audit against the configured database."""
    db_manager.init(database_url)
    try:
        async with db_manager.session() as session:
            service = InstallmentAuditService(PostgresContractRepository(session))
            return await service.run(apply=apply)
    finally:
        await db_manager.close()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    # Report goes to stdout; logs go to stderr.
    setup_logging(log_format="console", stream=sys.stderr)

    try:
        report = asyncio.run(run_audit(args.apply, args.database_url))
    except Exception as exc:
        logger.error("audit_aborted", error=str(exc), error_type=type(exc).__name__)
        traceback.print_exc(file=sys.stderr)
        return 1

    for line in render_report(report):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
