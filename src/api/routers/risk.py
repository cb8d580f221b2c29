"""Risk endpoints: assess a proposed swap before it is submitted."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from config.settings import settings
from src.api.app import limiter
from src.api.dependencies import get_assessor
from src.risk.assessor import RiskAssessor
from src.risk.models import InvalidSwapInput, SwapParameters, TokenInfo
from src.risk.policy import explain_assessment, should_block_transaction, should_show_warning

router = APIRouter(prefix="/api/v1/risk", tags=["risk"])

# Enrichment fields stay loose here; TokenInfo.from_dict maps bad values to defaults
LooseNumber = str | int | float | None


class SwapBody(BaseModel):
    """Swap parameters as sent by the swap form."""

    fromToken: str
    toToken: str
    amount: str | int | float
    slippageTolerance: LooseNumber = None
    gasPrice: LooseNumber = None
    protocol: str | None = None

    model_config = {"extra": "ignore"}


class TokenBody(BaseModel):
    address: str
    symbol: str = ""
    name: str = ""
    decimals: str | int | None = None
    totalSupply: LooseNumber = None
    marketCap: LooseNumber = None
    volume24h: LooseNumber = None
    priceChange24h: LooseNumber = None
    liquidity: LooseNumber = None
    holders: LooseNumber = None
    isVerified: bool | str | int | None = None
    auditStatus: str | None = None

    model_config = {"extra": "ignore"}


class AssessRequest(BaseModel):
    swap: SwapBody
    fromToken: TokenBody
    toToken: TokenBody


class RiskFactorOut(BaseModel):
    type: str
    severity: str
    description: str
    impact: str


class AssessResponse(BaseModel):
    overallRisk: str
    riskScore: int
    riskFactors: list[RiskFactorOut]
    recommendations: list[str]
    shouldWarn: bool
    shouldBlock: bool
    explanation: str


@router.post("/assess", response_model=AssessResponse)
@limiter.limit(settings.api_rate_limit)
async def assess_swap(
    request: Request,
    body: AssessRequest,
    assessor: RiskAssessor = Depends(get_assessor),
) -> AssessResponse:
    """Score a swap and tell the caller whether to warn or block."""
    swap_data = body.swap.model_dump(exclude_none=True)
    swap_data["amount"] = str(body.swap.amount)
    params = SwapParameters.from_dict(swap_data)
    from_token = TokenInfo.from_dict(body.fromToken.model_dump(exclude_none=True))
    to_token = TokenInfo.from_dict(body.toToken.model_dump(exclude_none=True))

    try:
        assessment = await assessor.assess_swap_risk(params, from_token, to_token)
    except InvalidSwapInput as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return AssessResponse(
        **assessment.to_dict(),
        shouldWarn=should_show_warning(assessment),
        shouldBlock=should_block_transaction(assessment),
        explanation=explain_assessment(assessment),
    )
