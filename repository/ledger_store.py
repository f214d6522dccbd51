# repository/ledger_store.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Sequence
from redis.asyncio import Redis
from model.claim import Claim, ServerConfig
from repository.claim_repository import ClaimRepository
from repository.filename_repository import FilenameRepository
from repository.server_config_repository import ServerConfigRepository

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    Sole owner of the persisted ledger: filename registry, claims and
    per-guild config.

    Redis calls suspend the event loop, so a load-decide-save sequence can
    interleave with another request or a sweep. Callers wrap every such
    sequence in `async with store.transaction():`. The lock is per store
    instance; the app shares one instance (see controller_dependencies).
    """

    def __init__(
        self,
        seed_filenames: Sequence[str],
        client: Optional[Redis] = None,
    ) -> None:
        self._seed = list(seed_filenames)
        self._filenames = FilenameRepository(client)
        self._claims = ClaimRepository(client)
        self._configs = ServerConfigRepository(client)
        self._lock = asyncio.Lock()
        self._bootstrapped = False

    async def bootstrap(self) -> None:
        """Write defaults for missing records. Existing data is never overwritten."""
        if self._bootstrapped:
            return
        seeded = await self._filenames.bootstrap(self._seed)
        created = await self._claims.bootstrap()
        if seeded or created:
            logger.info(
                "ledger.bootstrap filenames_seeded=%s claims_created=%s",
                seeded,
                created,
            )
        self._bootstrapped = True

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["LedgerStore"]:
        async with self._lock:
            yield self

    # ---------------- Registry ----------------

    async def load_filenames(self) -> List[str]:
        await self.bootstrap()
        return await self._filenames.load()

    # ---------------- Claims ----------------

    async def load_claims(self) -> List[Claim]:
        await self.bootstrap()
        return await self._claims.load()

    async def save_claims(self, claims: Sequence[Claim]) -> None:
        await self._claims.save(claims)

    # ---------------- Server config ----------------

    async def load_config(self, guild_id: str) -> ServerConfig:
        return await self._configs.load(guild_id)

    async def save_config(self, guild_id: str, config: ServerConfig) -> None:
        await self._configs.save(guild_id, config)
