"""Domain models - immutable dataclasses for one debt assessment"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class RiskTier(str, Enum):
    """Debt-to-income classification, ordered from least to most severe"""

    CONTROLLED = "controlled"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Severity paired with each tier"""

    NONE = "none"
    MEDIUM = "medium"
    HIGH = "high"
    HIGHEST = "highest"


@dataclass(frozen=True)
class FinancialInput:
    """Monthly figures entered on the form, in currency units"""

    income: Decimal
    expenses: Decimal
    debts: Decimal


@dataclass(frozen=True)
class RiskAssessment:
    """Output of risk evaluation"""

    ratio: Decimal  # unclamped, drives the tier
    risk_score: Decimal  # 0.00 - 100.00
    tier: RiskTier
    severity: Severity


@dataclass(frozen=True)
class Advisory:
    """Tier-specific advice shown at the end of the plan"""

    tier: RiskTier
    severity: Severity
    title: str
    message: str


@dataclass(frozen=True)
class RestructuringPlan:
    """Recommendations derived from income and risk tier"""

    debt_payment: str
    debt_payment_amount: Decimal
    essential_spending: str
    essential_spending_limit: Decimal
    savings: str
    savings_target: Decimal
    advisory: Advisory
    expense_review: Optional[str] = None


@dataclass(frozen=True)
class Analysis:
    """Assessment and plan computed from the same inputs"""

    financials: FinancialInput
    assessment: RiskAssessment
    plan: RestructuringPlan
