# controller/claim_controller.py
from fastapi import APIRouter, Depends, Query, status
from model.api import (
    AutocompleteResponse,
    ClaimRequest,
    ClaimResponse,
    MessageResponse,
    MyClaimsResponse,
    ReleaseRequest,
)
from service.claim_service import ClaimService
from util.constants import InternalURIs
from controller.controller_dependencies import get_claim_service, rate_limiter

claim_router = APIRouter(dependencies=[Depends(rate_limiter)])


@claim_router.post(
    InternalURIs.CLAIMS,
    response_model=ClaimResponse,
    status_code=status.HTTP_201_CREATED,
)
async def claim_filename(
    payload: ClaimRequest,
    service: ClaimService = Depends(get_claim_service),
) -> ClaimResponse:
    return await service.claim(payload.filename, payload.userId, payload.guildId)


@claim_router.post(InternalURIs.RELEASE_CLAIM, response_model=MessageResponse)
async def release_filename(
    payload: ReleaseRequest,
    service: ClaimService = Depends(get_claim_service),
) -> MessageResponse:
    message = await service.unclaim(payload.filename, payload.userId)
    return MessageResponse(message=message)


@claim_router.get(InternalURIs.MY_CLAIMS, response_model=MyClaimsResponse)
async def my_claims(
    userId: str = Query(..., min_length=1),
    service: ClaimService = Depends(get_claim_service),
) -> MyClaimsResponse:
    return MyClaimsResponse(claims=await service.active_claims(userId))


@claim_router.get(InternalURIs.AUTOCOMPLETE_CLAIM, response_model=AutocompleteResponse)
async def autocomplete_claim(
    partial: str = "",
    service: ClaimService = Depends(get_claim_service),
) -> AutocompleteResponse:
    return AutocompleteResponse.of(await service.autocomplete_claim(partial))


@claim_router.get(
    InternalURIs.AUTOCOMPLETE_UNCLAIM, response_model=AutocompleteResponse
)
async def autocomplete_unclaim(
    userId: str = Query(..., min_length=1),
    partial: str = "",
    service: ClaimService = Depends(get_claim_service),
) -> AutocompleteResponse:
    return AutocompleteResponse.of(await service.autocomplete_unclaim(partial, userId))
