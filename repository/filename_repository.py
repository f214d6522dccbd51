# repository/filename_repository.py
from typing import List, Optional, Sequence
from pydantic import TypeAdapter, ValidationError
from redis.asyncio import Redis
from config.cache import get_redis
from repository.namespaces import FILENAMES
from util.errors import LedgerCorruptError

_names_adapter = TypeAdapter(List[str])


class FilenameRepository:
    """
    The filename registry: an ordered JSON array stored under one key.

    Seeded once by bootstrap(); claim operations never write it.
    """

    def __init__(self, client: Optional[Redis] = None) -> None:
        self._redis = client

    async def _client(self) -> Redis:
        return self._redis if self._redis is not None else await get_redis()

    async def bootstrap(self, seed: Sequence[str]) -> bool:
        r = await self._client()
        return bool(await r.set(FILENAMES, _names_adapter.dump_json(list(seed)), nx=True))

    async def load(self) -> List[str]:
        r = await self._client()
        raw = await r.get(FILENAMES)
        if raw is None:
            return []
        try:
            return _names_adapter.validate_json(raw)
        except ValidationError as e:
            raise LedgerCorruptError(FILENAMES, str(e)) from e
