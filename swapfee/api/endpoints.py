"""API endpoints for the fee rule engine."""

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, StrictInt, StrictStr

from swapfee.engine import RuleEngine
from swapfee.fees import FeeInputError, calculate_amount_after_fee, calculate_fee
from swapfee.models.results import MatchResult, SwapRequest
from swapfee.registry.base import RegistryNotReadyError, TokenRegistryFetchError

logger = structlog.get_logger()

router = APIRouter()

# Engine built at startup from SWAPFEE_CONFIG_PATH (see swapfee.api.main)
_engine: RuleEngine | None = None


def set_engine(engine: RuleEngine | None) -> None:
    """Install the engine served by the endpoints."""
    global _engine
    _engine = engine


def get_engine() -> RuleEngine:
    """Dependency provider for the rule engine.

    Override this in tests to inject an engine:
        app.dependency_overrides[get_engine] = lambda: engine

    Raises:
        HTTPException: 503 if no fee configuration has been loaded
    """
    if _engine is None:
        raise HTTPException(status_code=503, detail="Fee configuration not loaded")
    return _engine


class FeeRequest(BaseModel):
    """Body of POST /fee."""

    amount: StrictStr | StrictInt
    bps: StrictInt


class FeeResponse(BaseModel):
    """Fee and remainder for an amount, as decimal strings."""

    fee: str
    amount_after_fee: str = Field(alias="amountAfterFee")

    model_config = {"populate_by_name": True}


@router.post("/match", response_model_exclude_none=True)
async def match(
    request: SwapRequest,
    engine: RuleEngine = Depends(get_engine),
) -> MatchResult:
    """Decide the fee for a swap request.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Token registry cannot be loaded: 503
    """
    try:
        result = await engine.match_with_refresh(request)
    except (TokenRegistryFetchError, RegistryNotReadyError) as err:
        logger.warning(
            "match_registry_unavailable",
            origin_asset=request.origin_asset,
            destination_asset=request.destination_asset,
            error=str(err),
        )
        raise HTTPException(status_code=503, detail=str(err)) from err

    logger.info(
        "match_decided",
        origin_asset=request.origin_asset,
        destination_asset=request.destination_asset,
        matched=result.matched,
        rule_id=result.rule.id if result.rule else None,
    )
    return result


@router.post("/fee")
async def fee(request: FeeRequest) -> FeeResponse:
    """Compute the fee and remaining amount for an amount and rate.

    Invalid amounts or rates return 422.
    """
    try:
        return FeeResponse(
            fee=calculate_fee(request.amount, request.bps),
            amount_after_fee=calculate_amount_after_fee(request.amount, request.bps),
        )
    except FeeInputError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
