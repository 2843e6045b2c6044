"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional


class AssessmentRequest(BaseModel):
    """Request body for POST /v1/assessment - raw pt-BR form text"""

    income: str = Field(..., description="Monthly income, e.g. '3.500,00'")
    expenses: str = Field(..., description="Monthly expenses, e.g. '1.200,00'")
    debts: str = Field(..., description="Current debts, e.g. '800,00'")


class AdvisorySchema(BaseModel):
    """Tier-specific advice card"""

    title: str
    message: str
    severity: str
    background_color: str
    border_color: str


class PlanSchema(BaseModel):
    """Restructuring plan recommendations"""

    debt_payment: str
    debt_payment_amount: float
    essential_spending: str
    essential_spending_limit: float
    expense_review: Optional[str] = None
    savings: str
    savings_target: float
    advisory: AdvisorySchema


class AssessmentResponse(BaseModel):
    """Response for POST /v1/assessment"""

    risk_score: float
    risk_score_display: str
    tier: str
    severity: str
    plan: PlanSchema


class InputMaskRequest(BaseModel):
    """Request body for POST /v1/input-mask"""

    value: str = Field("", description="Raw text typed into a currency field")


class InputMaskResponse(BaseModel):
    """Response for POST /v1/input-mask"""

    value: str
