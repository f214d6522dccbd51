# repository/claim_repository.py
from typing import List, Optional, Sequence
from pydantic import TypeAdapter, ValidationError
from redis.asyncio import Redis
from config.cache import get_redis
from model.claim import Claim
from repository.namespaces import CLAIMS
from util.errors import LedgerCorruptError

_claims_adapter = TypeAdapter(List[Claim])


class ClaimRepository:
    """
    Flow:
    - The whole claim list lives in one JSON document under CLAIMS.
    - save() replaces it with a single SET, so a reader sees either the old
      list or the new one, never a partial write.
    """

    def __init__(self, client: Optional[Redis] = None) -> None:
        self._redis = client

    async def _client(self) -> Redis:
        return self._redis if self._redis is not None else await get_redis()

    async def bootstrap(self) -> bool:
        r = await self._client()
        return bool(await r.set(CLAIMS, b"[]", nx=True))

    async def load(self) -> List[Claim]:
        r = await self._client()
        raw = await r.get(CLAIMS)
        if raw is None:
            return []
        try:
            return _claims_adapter.validate_json(raw)
        except ValidationError as e:
            raise LedgerCorruptError(CLAIMS, str(e)) from e

    async def save(self, claims: Sequence[Claim]) -> None:
        r = await self._client()
        await r.set(CLAIMS, _claims_adapter.dump_json(list(claims), indent=2))
