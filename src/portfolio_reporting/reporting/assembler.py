# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..cash_flow.bucketer import CashFlowBucket
from ..core.errors import SkippedRecord
from ..core.primitives import Collection
from ..insights.generator import Insights, RiskEntry
from ..metrics.computer import MetricGroups
from ..risk.classifier import ProjectFinancialSummary
from .report import Report, ReportRequest

logger = logging.getLogger(__name__)


def assemble_report(
    request: ReportRequest,
    groups: MetricGroups,
    cash_flow: Iterable[CashFlowBucket],
    projects: Sequence[ProjectFinancialSummary],
    risks: Sequence[RiskEntry],
    insights: Insights,
    skipped_records: Sequence[SkippedRecord] = (),
    unavailable_collections: Sequence[Collection] = (),
) -> Report:
    """
    Compose the stage outputs into one frozen Report.

    No figure is computed here; every section arrives ready from its stage.
    """
    report = Report(
        executive_summary=groups.executive_summary,
        kpis=groups.kpis,
        sales_performance=groups.sales_performance,
        funding_structure=groups.funding_structure,
        construction_status=groups.construction_status,
        accounting_overview=groups.accounting_overview,
        tic_cost_management=groups.tic_cost_management,
        office_expenses=groups.office_expenses,
        company_credits=groups.company_credits,
        company_loans=groups.company_loans,
        bank_accounts=groups.bank_accounts,
        buildings_units=groups.buildings_units,
        retail_portfolio=groups.retail_portfolio,
        contract_types=groups.contract_types,
        cash_flow=tuple(cash_flow),
        projects=tuple(projects),
        risks=tuple(risks),
        insights=insights,
        project_filter=request.project_filter,
        date_range=request.date_range,
        as_of=request.as_of,
        skipped_records=tuple(skipped_records),
        unavailable_collections=tuple(unavailable_collections),
    )
    if not report.is_complete:
        logger.warning(
            f"Report assembled with {len(report.skipped_records)} skipped records and "
            f"{len(report.unavailable_collections)} unavailable collections"
        )
    return report
