# controller/config_controller.py
from fastapi import APIRouter, Depends
from model.api import MessageResponse, OkChannelRequest
from service.claim_service import ClaimService
from util.constants import InternalURIs
from controller.controller_dependencies import get_claim_service, rate_limiter

config_router = APIRouter(dependencies=[Depends(rate_limiter)])


@config_router.post(InternalURIs.OK_CHANNEL, response_model=MessageResponse)
async def set_ok_channel(
    payload: OkChannelRequest,
    service: ClaimService = Depends(get_claim_service),
) -> MessageResponse:
    message = await service.set_ok_channel(
        guild_id=payload.guildId,
        channel_id=payload.channelId,
        channel_type=payload.channelType,
        is_admin=payload.requesterIsAdmin,
    )
    return MessageResponse(message=message)
