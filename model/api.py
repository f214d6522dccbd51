# model/api.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ClaimRequest(BaseModel):
    filename: str = Field(min_length=1)
    userId: str = Field(min_length=1)
    guildId: Optional[str] = None


class ClaimResponse(BaseModel):
    ok: bool = True
    filename: str
    expiresAt: datetime
    message: str


class ReleaseRequest(BaseModel):
    filename: str = Field(min_length=1)
    userId: str = Field(min_length=1)


class MessageResponse(BaseModel):
    ok: bool = True
    message: str


class ActiveClaim(BaseModel):
    filename: str
    expiresAt: datetime


class MyClaimsResponse(BaseModel):
    claims: List[ActiveClaim]


class AutocompleteChoice(BaseModel):
    name: str
    value: str


class AutocompleteResponse(BaseModel):
    choices: List[AutocompleteChoice]

    @classmethod
    def of(cls, names: List[str]) -> "AutocompleteResponse":
        return cls(choices=[AutocompleteChoice(name=n, value=n) for n in names])


class OkChannelRequest(BaseModel):
    guildId: Optional[str] = None
    channelId: str = Field(min_length=1)
    channelType: int
    requesterIsAdmin: bool = False
