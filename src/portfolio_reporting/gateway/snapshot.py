# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Snapshot loading: scatter/gather over the gateway, then parse.

All collection reads are issued concurrently and joined before anything is
computed, so no downstream stage ever sees a partially fetched snapshot.
After the gather the pipeline is synchronous and purely in-memory.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..core.errors import ComputationError, FetchError, SkippedRecord
from ..core.primitives import Collection, Model, Record, ReportSettings
from ..entities import (
    RECORD_TYPES,
    Bank,
    BankAccount,
    BankCredit,
    Building,
    Company,
    CompanyLoan,
    Contract,
    ContractType,
    CreditAllocation,
    CreditLine,
    Customer,
    Investor,
    Invoice,
    OfficeSupplier,
    Payment,
    Project,
    ProjectInvestment,
    ProjectPhase,
    RetailContract,
    RetailCustomer,
    RetailLandPlot,
    RetailPhase,
    RetailProject,
    RetailSupplier,
    Sale,
    Subcontractor,
    SubcontractorMilestone,
    TicCostStructure,
    Unit,
    WorkLog,
)
from .base import DataAccessGateway, Row
from .fetched import Empty, Fetched, Some, Unavailable, fetched_from_rows

logger = logging.getLogger(__name__)


def snapshot_field(collection: Collection) -> str:
    """Name of the PortfolioSnapshot attribute holding a collection."""
    return collection.name.lower()


class PortfolioSnapshot(Model):
    """
    Immutable, fully parsed copy of every collection for one run.

    Attributes:
        unavailable: Collections that could not be read (only populated when
            the run tolerates unavailable collections).
        skipped: Rows rejected during parsing.
    """

    projects: Tuple[Project, ...] = ()
    buildings: Tuple[Building, ...] = ()
    units: Tuple[Unit, ...] = ()
    sales: Tuple[Sale, ...] = ()
    customers: Tuple[Customer, ...] = ()

    contracts: Tuple[Contract, ...] = ()
    contract_types: Tuple[ContractType, ...] = ()
    subcontractors: Tuple[Subcontractor, ...] = ()
    project_phases: Tuple[ProjectPhase, ...] = ()
    work_logs: Tuple[WorkLog, ...] = ()
    subcontractor_milestones: Tuple[SubcontractorMilestone, ...] = ()
    investors: Tuple[Investor, ...] = ()
    project_investments: Tuple[ProjectInvestment, ...] = ()
    bank_credits: Tuple[BankCredit, ...] = ()

    invoices: Tuple[Invoice, ...] = ()
    payments: Tuple[Payment, ...] = ()
    companies: Tuple[Company, ...] = ()
    banks: Tuple[Bank, ...] = ()
    bank_accounts: Tuple[BankAccount, ...] = ()
    credit_lines: Tuple[CreditLine, ...] = ()
    company_loans: Tuple[CompanyLoan, ...] = ()
    credit_allocations: Tuple[CreditAllocation, ...] = ()
    tic_cost_structures: Tuple[TicCostStructure, ...] = ()
    office_suppliers: Tuple[OfficeSupplier, ...] = ()

    retail_projects: Tuple[RetailProject, ...] = ()
    retail_phases: Tuple[RetailPhase, ...] = ()
    retail_contracts: Tuple[RetailContract, ...] = ()
    retail_land_plots: Tuple[RetailLandPlot, ...] = ()
    retail_customers: Tuple[RetailCustomer, ...] = ()
    retail_suppliers: Tuple[RetailSupplier, ...] = ()

    unavailable: Tuple[Collection, ...] = ()
    skipped: Tuple[SkippedRecord, ...] = ()

    def records(self, collection: Collection) -> Tuple[Record, ...]:
        return getattr(self, snapshot_field(collection))


def parse_records(
    collection: Collection, rows: Sequence[Row]
) -> Tuple[Tuple[Record, ...], Tuple[SkippedRecord, ...]]:
    """
    Validate raw rows into typed records.

    Rows that fail validation (negative amounts, unparsable dates, unknown
    enum values) are skipped and reported instead of failing the run.
    """
    record_cls = RECORD_TYPES[collection]
    records: List[Record] = []
    skipped: List[SkippedRecord] = []
    for row in rows:
        try:
            records.append(record_cls.model_validate(row))
        except ValidationError as e:
            record_id = row.get("id") if isinstance(row, Mapping) else None
            reason = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or '<row>'}: {err['msg']}"
                for err in e.errors()
            )
            error = ComputationError(
                collection, str(record_id) if record_id is not None else None, reason
            )
            logger.warning(f"Skipping record: {error}")
            skipped.append(SkippedRecord.from_error(error))
    return tuple(records), tuple(skipped)


async def fetch_collection(
    gateway: DataAccessGateway, collection: Collection, timeout: Optional[float]
) -> Fetched:
    """Read one collection, converting any failure into an `Unavailable` result."""
    try:
        rows = await asyncio.wait_for(gateway.fetch(collection), timeout=timeout)
        # Lazy row sources are consumed here so their errors are caught too.
        return fetched_from_rows(rows)
    except asyncio.TimeoutError as e:
        logger.warning(f"Read of '{collection.value}' timed out after {timeout}s")
        return Unavailable(e)
    except Exception as e:  # noqa: BLE001 - gateway boundary, reported as Unavailable
        logger.warning(f"Read of '{collection.value}' failed: {e!r}")
        return Unavailable(e)


async def gather_collections(
    gateway: DataAccessGateway,
    timeout: Optional[float] = None,
    collections: Iterable[Collection] = tuple(Collection),
) -> Dict[Collection, Fetched]:
    """Issue every read concurrently and wait for all of them."""
    collections = tuple(collections)
    logger.debug(f"Fetching {len(collections)} collections concurrently")
    results = await asyncio.gather(
        *(fetch_collection(gateway, c, timeout) for c in collections)
    )
    return dict(zip(collections, results))


def build_snapshot(
    fetched: Mapping[Collection, Fetched], fail_on_unavailable: bool = True
) -> PortfolioSnapshot:
    """
    Assemble a snapshot from gathered read results.

    Args:
        fetched: Read result per collection; collections not present are empty.
        fail_on_unavailable: Raise on the first unavailable collection instead
            of recording it and continuing with no rows.

    Raises:
        FetchError: If a collection is unavailable and fail_on_unavailable is set.
    """
    fields: Dict[str, Tuple[Record, ...]] = {}
    unavailable: List[Collection] = []
    skipped: List[SkippedRecord] = []

    for collection in Collection:
        result = fetched.get(collection, Empty())
        if isinstance(result, Unavailable):
            if fail_on_unavailable:
                raise FetchError(collection, result.error)
            logger.warning(
                f"Collection '{collection.value}' unavailable; continuing without it"
            )
            unavailable.append(collection)
            continue
        if isinstance(result, Some):
            records, rejected = parse_records(collection, result.rows)
            fields[snapshot_field(collection)] = records
            skipped.extend(rejected)

    return PortfolioSnapshot(
        **fields, unavailable=tuple(unavailable), skipped=tuple(skipped)
    )


async def load_snapshot(
    gateway: DataAccessGateway, settings: Optional[ReportSettings] = None
) -> PortfolioSnapshot:
    """Scatter/gather every collection from the gateway and parse the result."""
    if settings is None:
        settings = ReportSettings()
    fetched = await gather_collections(gateway, timeout=settings.fetch_timeout_seconds)
    return build_snapshot(fetched, fail_on_unavailable=settings.fail_on_unavailable)
