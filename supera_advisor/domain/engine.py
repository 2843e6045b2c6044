"""Risk engine - debt-to-income scoring and restructuring plan generation"""

import math
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Dict

from supera_advisor.domain.exceptions import ValidationError
from supera_advisor.domain.models import (
    Advisory,
    Analysis,
    FinancialInput,
    RestructuringPlan,
    RiskAssessment,
    RiskTier,
    Severity,
)
from supera_advisor.utils.locale_format import format_brl, quantize_cents

# Tier thresholds on the unclamped ratio
CRITICAL_RATIO = Decimal("1.00")
HIGH_RATIO = Decimal("0.45")
MODERATE_RATIO = Decimal("0.30")

# Plan multipliers, applied to monthly income (debt share applied to debts)
DEBT_PAYMENT_INCOME_SHARE = Decimal("0.3")
DEBT_PAYMENT_DEBT_SHARE = Decimal("0.1")
ESSENTIAL_SPENDING_SHARE = Decimal("0.5")
SAVINGS_SHARE = Decimal("0.2")

# Largest monthly figure the form accepts: R$ 999.999.999.999.999,99
MAX_AMOUNT = Decimal("999999999999999.99")

SCORE_MIN = Decimal("0")
SCORE_MAX = Decimal("100")

SEVERITY_BY_TIER: Dict[RiskTier, Severity] = {
    RiskTier.CONTROLLED: Severity.NONE,
    RiskTier.MODERATE: Severity.MEDIUM,
    RiskTier.HIGH: Severity.HIGH,
    RiskTier.CRITICAL: Severity.HIGHEST,
}

ADVISORY_TEMPLATES: Dict[RiskTier, Dict[str, str]] = {
    RiskTier.CRITICAL: {
        "title": "🚨 Alerta Crítico",
        "message": (
            "Seu endividamento está crítico! Suas dívidas e gastos ultrapassam sua renda. "
            "Busque renegociar e cortar despesas."
        ),
    },
    RiskTier.HIGH: {
        "title": "⚠️ Alerta",
        "message": "Seu endividamento está alto! Considere renegociar suas dívidas com os credores.",
    },
    RiskTier.MODERATE: {
        "title": "⚠️ Atenção",
        "message": "Seu endividamento está moderado. Tente reduzir gastos desnecessários.",
    },
    RiskTier.CONTROLLED: {
        "title": "🎉 Parabéns",
        "message": "Seu endividamento está sob controle. Continue assim!",
    },
}

EXPENSE_REVIEW_TEXT = "🔎 Rever gastos variáveis e cortar despesas desnecessárias."


def _to_decimal(name: str, value: Any) -> Decimal:
    """Coerce an already-parsed form value to a finite Decimal"""
    # bool is an int subclass; True is not an amount
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{name} is required", field=name)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"{name} must be a finite number", field=name)
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValidationError(f"{name} is not a number: {value!r}", field=name) from e
    else:
        raise ValidationError(f"{name} has unsupported type {type(value).__name__}", field=name)

    if not result.is_finite():
        raise ValidationError(f"{name} must be a finite number", field=name)
    if abs(result) > MAX_AMOUNT:
        raise ValidationError(f"{name} exceeds the largest accepted amount", field=name)
    return result


def validate_financials(income: Any, expenses: Any, debts: Any) -> FinancialInput:
    """
    Check the three form values and bundle them.

    Raises:
        ValidationError: a value is missing, non-numeric, non-finite or above
            MAX_AMOUNT, income is not positive, or expenses/debts are negative
    """
    financials = FinancialInput(
        income=_to_decimal("income", income),
        expenses=_to_decimal("expenses", expenses),
        debts=_to_decimal("debts", debts),
    )

    if financials.income <= 0:
        raise ValidationError("income must be greater than zero", field="income")
    if financials.expenses < 0:
        raise ValidationError("expenses cannot be negative", field="expenses")
    if financials.debts < 0:
        raise ValidationError("debts cannot be negative", field="debts")

    return financials


def debt_to_income_ratio(financials: FinancialInput) -> Decimal:
    """(expenses + debts) / income; Infinity when income is too small to divide by"""
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        return (financials.expenses + financials.debts) / financials.income


def classify_ratio(ratio: Decimal) -> RiskTier:
    """
    Map the unclamped ratio to a tier. Checked from most to least severe.

    Bands:
    - > 1.00:        critical (spending plus debts exceed income)
    - 0.45 - 1.00:   high
    - 0.30 - 0.45:   moderate
    - <= 0.30:       controlled
    """
    if ratio > CRITICAL_RATIO:
        return RiskTier.CRITICAL
    elif ratio > HIGH_RATIO:
        return RiskTier.HIGH
    elif ratio > MODERATE_RATIO:
        return RiskTier.MODERATE
    else:
        return RiskTier.CONTROLLED


def calculate_risk_score(ratio: Decimal) -> Decimal:
    """Ratio as a percentage, clamped to 0-100 for display, two decimals"""
    score = min(max(ratio * 100, SCORE_MIN), SCORE_MAX)
    return quantize_cents(score)


def evaluate(income: Any, expenses: Any, debts: Any) -> RiskAssessment:
    """
    Score debt risk for one set of monthly figures.

    The score is bounded to [0, 100]; the tier is derived from the
    unbounded ratio so a ratio of 1.75 still reads as critical.

    Example:
        income=1000, expenses=400, debts=200
        ratio = 600 / 1000 = 0.6 -> score 60.00 -> high
    """
    financials = validate_financials(income, expenses, debts)
    return _assess(financials)


def _assess(financials: FinancialInput) -> RiskAssessment:
    ratio = debt_to_income_ratio(financials)
    tier = classify_ratio(ratio)
    return RiskAssessment(
        ratio=ratio,
        risk_score=calculate_risk_score(ratio),
        tier=tier,
        severity=SEVERITY_BY_TIER[tier],
    )


def get_advisory(tier: RiskTier) -> Advisory:
    """Fixed advice template for a tier"""
    template = ADVISORY_TEMPLATES[tier]
    return Advisory(
        tier=tier,
        severity=SEVERITY_BY_TIER[tier],
        title=template["title"],
        message=template["message"],
    )


def build_plan(income: Any, expenses: Any, debts: Any) -> RestructuringPlan:
    """
    Generate the restructuring plan for one set of monthly figures.

    Requirements:
    - Debt payment: min(30% of income, 10% of debts) per month
    - Essential spending kept under 50% of income
    - Savings of at least 20% of income
    - Expense review only when expenses exceed 50% of income
    - Advisory chosen by the same tier bands as evaluate()
    """
    financials = validate_financials(income, expenses, debts)
    return _plan(financials, classify_ratio(debt_to_income_ratio(financials)))


def _plan(financials: FinancialInput, tier: RiskTier) -> RestructuringPlan:
    income = financials.income

    debt_payment = quantize_cents(
        min(
            income * DEBT_PAYMENT_INCOME_SHARE,
            financials.debts * DEBT_PAYMENT_DEBT_SHARE,
        )
    )
    essential_limit = quantize_cents(income * ESSENTIAL_SPENDING_SHARE)
    savings_target = quantize_cents(income * SAVINGS_SHARE)

    # Compared on raw figures, not the rounded ceiling
    needs_review = financials.expenses > income * ESSENTIAL_SPENDING_SHARE

    return RestructuringPlan(
        debt_payment=f"💰 Destinar R$ {format_brl(debt_payment)} para pagamento de dívidas mensalmente.",
        debt_payment_amount=debt_payment,
        essential_spending=f"🏡 Manter gastos essenciais abaixo de R$ {format_brl(essential_limit)}.",
        essential_spending_limit=essential_limit,
        savings=f"📈 Guardar pelo menos R$ {format_brl(savings_target)} por mês para emergência.",
        savings_target=savings_target,
        advisory=get_advisory(tier),
        expense_review=EXPENSE_REVIEW_TEXT if needs_review else None,
    )


def analyze(income: Any, expenses: Any, debts: Any) -> Analysis:
    """
    Main entry point: validate once, then score and plan.

    Returns complete Analysis with inputs, assessment and plan.
    """
    financials = validate_financials(income, expenses, debts)
    assessment = _assess(financials)
    plan = _plan(financials, assessment.tier)

    return Analysis(financials=financials, assessment=assessment, plan=plan)
