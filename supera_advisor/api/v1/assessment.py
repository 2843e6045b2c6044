"""POST /v1/assessment - debt risk score and restructuring plan endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from supera_advisor.api.v1.schemas import (
    AdvisorySchema,
    AssessmentRequest,
    AssessmentResponse,
    PlanSchema,
)
from supera_advisor.api.dependencies import get_request_id
from supera_advisor.domain.engine import analyze
from supera_advisor.domain.exceptions import ValidationError
from supera_advisor.domain.models import Severity
from supera_advisor.infrastructure.observability.metrics import record_assessment, validation_failure_counter
from supera_advisor.infrastructure.observability.logging import log_assessment
from supera_advisor.utils.locale_format import format_brl, parse_locale_decimal

router = APIRouter()

INCOMPLETE_FORM_DETAIL = "Por favor, preencha todos os campos corretamente."

# Card colors for the advisory, keyed by severity: (background, border)
ADVISORY_PALETTE = {
    Severity.HIGHEST: ("#f8d7da", "#f5c6cb"),
    Severity.HIGH: ("#fde8ec", "#d9534f"),
    Severity.MEDIUM: ("#fff3cd", "#ffeeba"),
    Severity.NONE: ("#d4edda", "#c3e6cb"),
}


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(
    request_body: AssessmentRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Score debt risk and build a restructuring plan from raw form text.

    Flow:
    1. Parse the three pt-BR amounts
    2. Evaluate ratio, score and tier
    3. Build the plan and advisory
    4. Record metrics and log the outcome (never the amounts)
    """
    start_time = time.perf_counter()

    try:
        analysis = analyze(
            parse_locale_decimal(request_body.income, field="income"),
            parse_locale_decimal(request_body.expenses, field="expenses"),
            parse_locale_decimal(request_body.debts, field="debts"),
        )
    except ValidationError as e:
        validation_failure_counter.inc()
        logging.warning(f"Invalid form data: {e}", extra={"request_id": request_id, "field": e.field})
        raise HTTPException(status_code=422, detail=INCOMPLETE_FORM_DETAIL)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    assessment = analysis.assessment
    plan = analysis.plan
    background, border = ADVISORY_PALETTE[plan.advisory.severity]

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_assessment(assessment.tier.value, float(assessment.risk_score))
    log_assessment(
        request_id,
        assessment.tier.value,
        float(assessment.risk_score),
        plan.expense_review is not None,
        duration_ms,
    )

    return AssessmentResponse(
        risk_score=float(assessment.risk_score),
        risk_score_display=format_brl(assessment.risk_score),
        tier=assessment.tier.value,
        severity=assessment.severity.value,
        plan=PlanSchema(
            debt_payment=plan.debt_payment,
            debt_payment_amount=float(plan.debt_payment_amount),
            essential_spending=plan.essential_spending,
            essential_spending_limit=float(plan.essential_spending_limit),
            expense_review=plan.expense_review,
            savings=plan.savings,
            savings_target=float(plan.savings_target),
            advisory=AdvisorySchema(
                title=plan.advisory.title,
                message=plan.advisory.message,
                severity=plan.advisory.severity.value,
                background_color=background,
                border_color=border,
            ),
        ),
    )
