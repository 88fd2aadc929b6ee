# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Report generation API

Public entry points for producing a Report. `compute_report` is the pure,
synchronous half (snapshot in, Report out); `generate_report` adds the
concurrent gateway read in front of it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..aggregation import AggregationEngine
from ..cash_flow import bucket_cash_flow, classify_payments
from ..core.primitives import ReportSettings
from ..gateway import load_snapshot
from ..insights import InsightGenerator
from ..metrics import MetricsComputer
from ..reporting import Report, ReportRequest, assemble_report
from ..risk import ProjectRiskClassifier

if TYPE_CHECKING:
    from ..gateway import DataAccessGateway, PortfolioSnapshot

logger = logging.getLogger(__name__)


def compute_report(
    snapshot: "PortfolioSnapshot",
    request: ReportRequest,
    settings: Optional[ReportSettings] = None,
) -> Report:
    """
    Compute a Report from an already loaded snapshot.

    Workflow:
      1) Resolve sale revenue and contract expense facts
      2) Compute the portfolio metric groups
      3) Bucket payments into monthly cash flow over the requested range
      4) Summarize and classify the filtered projects
      5) Apply the insight and risk rules
      6) Assemble the frozen Report

    The result depends only on the arguments: the same snapshot and request
    always give an equal Report.

    Args:
        snapshot: Parsed collections.
        request: Project filter, cash-flow range and as-of date.
        settings: Thresholds and windows; defaults when omitted.

    Returns:
        The assembled Report, with skipped records from parsing and
        aggregation and any collections that could not be read.
    """
    if settings is None:
        settings = ReportSettings()

    facts = AggregationEngine(snapshot).aggregate()
    groups = MetricsComputer(snapshot, facts, request.as_of, settings).compute_all()

    inflows, outflows = classify_payments(snapshot.payments, snapshot.invoices)
    cash_flow = list(bucket_cash_flow(inflows, outflows, request.date_range))

    projects = ProjectRiskClassifier(snapshot, facts, settings.risk).classify(
        request.project_filter
    )
    generator = InsightGenerator(projects, groups, settings.risk)

    report = assemble_report(
        request=request,
        groups=groups,
        cash_flow=cash_flow,
        projects=projects,
        risks=generator.risks(),
        insights=generator.insights(),
        skipped_records=snapshot.skipped + facts.skipped,
        unavailable_collections=snapshot.unavailable,
    )
    logger.info(
        f"Report computed as of {request.as_of}: {len(report.projects)} projects, "
        f"{len(report.cash_flow)} months, {len(report.risks)} risks"
    )
    return report


async def generate_report(
    gateway: "DataAccessGateway",
    request: ReportRequest,
    settings: Optional[ReportSettings] = None,
) -> Report:
    """
    Read every collection concurrently, then compute the Report.

    Raises:
        FetchError: If a collection cannot be read and the settings do not
            tolerate unavailable collections.
    """
    if settings is None:
        settings = ReportSettings()
    snapshot = await load_snapshot(gateway, settings)
    return compute_report(snapshot, request, settings)
