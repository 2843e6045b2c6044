"""POST /v1/input-mask - currency mask for form fields as the user types"""

from fastapi import APIRouter

from supera_advisor.api.v1.schemas import InputMaskRequest, InputMaskResponse
from supera_advisor.utils.locale_format import mask_currency_input

router = APIRouter()


@router.post("/input-mask", response_model=InputMaskResponse)
def apply_input_mask(request_body: InputMaskRequest):
    """
    Reformat raw field text as a pt-BR amount.

    Returns:
        "1234" -> "12,34"; text without digits -> ""
    """
    return InputMaskResponse(value=mask_currency_input(request_body.value))
