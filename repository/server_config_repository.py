# repository/server_config_repository.py
from typing import Optional
from pydantic import ValidationError
from redis.asyncio import Redis
from config.cache import get_redis
from model.claim import ServerConfig
from repository.namespaces import SERVER_CONFIG
from util.errors import LedgerCorruptError


class ServerConfigRepository:
    """Per-guild settings, one hash field per guild id."""

    def __init__(self, client: Optional[Redis] = None) -> None:
        self._redis = client

    async def _client(self) -> Redis:
        return self._redis if self._redis is not None else await get_redis()

    async def load(self, guild_id: str) -> ServerConfig:
        r = await self._client()
        raw = await r.hget(SERVER_CONFIG, guild_id)
        if raw is None:
            return ServerConfig()
        try:
            return ServerConfig.model_validate_json(raw)
        except ValidationError as e:
            raise LedgerCorruptError(f"{SERVER_CONFIG}:{guild_id}", str(e)) from e

    async def save(self, guild_id: str, config: ServerConfig) -> None:
        r = await self._client()
        payload = config.model_dump_json(exclude_none=True).encode("utf-8")
        await r.hset(SERVER_CONFIG, guild_id, payload)
