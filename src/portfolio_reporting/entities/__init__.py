# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Entity Records

Typed, immutable views of the rows each gateway collection returns.
`RECORD_TYPES` maps every collection to the record class used to parse it.
"""

from typing import Dict, Type

from ..core.primitives import Collection, Record
from .accounting import (
    Bank,
    BankAccount,
    Company,
    CompanyLoan,
    CreditAllocation,
    CreditLine,
    Invoice,
    OfficeSupplier,
    Payment,
    TicCostStructure,
)
from .construction import (
    BankCredit,
    Contract,
    ContractType,
    Investor,
    ProjectInvestment,
    ProjectPhase,
    Subcontractor,
    SubcontractorMilestone,
    WorkLog,
)
from .retail import (
    RetailContract,
    RetailCustomer,
    RetailLandPlot,
    RetailPhase,
    RetailProject,
    RetailSupplier,
)
from .sales import Building, Customer, Project, Sale, Unit

RECORD_TYPES: Dict[Collection, Type[Record]] = {
    Collection.PROJECTS: Project,
    Collection.BUILDINGS: Building,
    Collection.UNITS: Unit,
    Collection.SALES: Sale,
    Collection.CUSTOMERS: Customer,
    Collection.CONTRACTS: Contract,
    Collection.CONTRACT_TYPES: ContractType,
    Collection.SUBCONTRACTORS: Subcontractor,
    Collection.PROJECT_PHASES: ProjectPhase,
    Collection.WORK_LOGS: WorkLog,
    Collection.SUBCONTRACTOR_MILESTONES: SubcontractorMilestone,
    Collection.INVESTORS: Investor,
    Collection.PROJECT_INVESTMENTS: ProjectInvestment,
    Collection.BANK_CREDITS: BankCredit,
    Collection.INVOICES: Invoice,
    Collection.PAYMENTS: Payment,
    Collection.COMPANIES: Company,
    Collection.BANKS: Bank,
    Collection.BANK_ACCOUNTS: BankAccount,
    Collection.CREDIT_LINES: CreditLine,
    Collection.COMPANY_LOANS: CompanyLoan,
    Collection.CREDIT_ALLOCATIONS: CreditAllocation,
    Collection.TIC_COST_STRUCTURES: TicCostStructure,
    Collection.OFFICE_SUPPLIERS: OfficeSupplier,
    Collection.RETAIL_PROJECTS: RetailProject,
    Collection.RETAIL_PHASES: RetailPhase,
    Collection.RETAIL_CONTRACTS: RetailContract,
    Collection.RETAIL_LAND_PLOTS: RetailLandPlot,
    Collection.RETAIL_CUSTOMERS: RetailCustomer,
    Collection.RETAIL_SUPPLIERS: RetailSupplier,
}

__all__ = [
    "RECORD_TYPES",
    # Sales / units
    "Building",
    "Customer",
    "Project",
    "Sale",
    "Unit",
    # Construction / finance
    "BankCredit",
    "Contract",
    "ContractType",
    "Investor",
    "ProjectInvestment",
    "ProjectPhase",
    "Subcontractor",
    "SubcontractorMilestone",
    "WorkLog",
    # Accounting
    "Bank",
    "BankAccount",
    "Company",
    "CompanyLoan",
    "CreditAllocation",
    "CreditLine",
    "Invoice",
    "OfficeSupplier",
    "Payment",
    "TicCostStructure",
    # Retail
    "RetailContract",
    "RetailCustomer",
    "RetailLandPlot",
    "RetailPhase",
    "RetailProject",
    "RetailSupplier",
]
