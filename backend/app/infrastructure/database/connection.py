"""MongoDB connection manager.

One ``MongoConnectionManager`` is built per process (see ``app.main``) and
handed to the repositories. It connects on first use rather than at startup,
so a serverless host that never runs the ASGI lifespan still gets a working
handle on the first request, and a warm process reuses it afterwards.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConfigurationError, PyMongoError
from pymongo.server_api import ServerApi

from app.domain.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


class MongoConnectionManager:
    """Lazily opens and caches a single database handle.

    ``acquire()`` is safe to call concurrently: the first caller connects
    while the others wait on the lock and then receive the cached handle.
    A failed attempt caches nothing, so the next call tries again.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        *,
        client_factory: Callable[..., Any] = AsyncMongoClient,
        **client_options: Any,
    ):
        self._uri = uri
        self._database_name = database_name
        self._client_factory = client_factory
        self._client_options = {
            "server_api": ServerApi("1", strict=True, deprecation_errors=True),
            "tz_aware": True,
            **client_options,
        }
        self._client: Any = None
        self._database: AsyncDatabase | None = None
        self._lock = asyncio.Lock()

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    async def acquire(self) -> AsyncDatabase:
        """Return the cached database handle, connecting on first use."""
        if self._database is not None:
            return self._database

        async with self._lock:
            if self._database is None:
                self._database = await self._connect()
        return self._database

    async def _connect(self) -> AsyncDatabase:
        if not self._uri:
            raise StoreConnectionError("MONGO_URI is not configured")

        try:
            client = self._client_factory(self._uri, **self._client_options)
        except (ConfigurationError, ValueError, TypeError) as exc:
            logger.error("Invalid MongoDB connection string: %s", exc)
            raise StoreConnectionError(f"Invalid MongoDB connection string: {exc}") from exc

        # The client is only kept once both the ping and the database lookup
        # succeed; any other outcome, cancellation included, closes it.
        try:
            await client.admin.command("ping")
            database = client[self._database_name]
        except PyMongoError as exc:
            logger.error("MongoDB connection error: %s", exc)
            await client.close()
            raise StoreConnectionError(f"Could not connect to MongoDB: {exc}") from exc
        except BaseException:
            await client.close()
            raise

        self._client = client
        logger.info("Connected to MongoDB database '%s'", self._database_name)
        return database

    async def close(self) -> None:
        """Close the cached client, if any. Safe to call more than once."""
        async with self._lock:
            client, self._client, self._database = self._client, None, None
        if client is not None:
            await client.close()
            logger.info("MongoDB connection closed")
