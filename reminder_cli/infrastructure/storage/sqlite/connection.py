"""
Async SQLite connection pool with aiosqlite.

The pool is the storage handle shared by the command path and every armed
reminder task. It is passed explicitly to whoever needs it and opens its
connections lazily on first use.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from reminder_cli.config import get_logger
from reminder_cli.config.settings import StorageSettings

logger = get_logger(__name__)

# WAL lets an armed task delete a row while the command path is reading
CONNECTION_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
)


class ConnectionPool:
    """Fixed-size queue of aiosqlite connections, one coroutine per connection."""

    def __init__(
        self,
        db_path: Path,
        pool_size: int = 2,
        busy_timeout: int = 30000,
    ):
        self.db_path = db_path
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout

        self._idle: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue(maxsize=pool_size)
        self._opened: list[aiosqlite.Connection] = []
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "ConnectionPool":
        return cls(
            db_path=settings.db_path,
            pool_size=settings.pool_size,
            busy_timeout=settings.busy_timeout,
        )

    @property
    def is_open(self) -> bool:
        return bool(self._opened)

    async def initialize(self) -> None:
        """Open the pool's connections, creating the database file if needed."""
        async with self._lock:
            if self._opened:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            for _ in range(self.pool_size):
                conn = await self._connect()
                self._opened.append(conn)
                self._idle.put_nowait(conn)

            logger.debug(
                "connection_pool_opened",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
            )

    async def _connect(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self.db_path)
        for pragma in CONNECTION_PRAGMAS:
            await conn.execute(pragma)
        await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
        conn.row_factory = aiosqlite.Row
        return conn

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection for the duration of the block."""
        if not self._opened:
            await self.initialize()

        conn = await self._idle.get()
        try:
            yield conn
        finally:
            self._idle.put_nowait(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection and commit on success, roll back on error."""
        async with self.acquire() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        """Close every connection. The pool reopens on next use."""
        async with self._lock:
            if not self._opened:
                return
            for conn in self._opened:
                await conn.close()
            self._opened.clear()
            self._idle = asyncio.Queue(maxsize=self.pool_size)
            logger.debug("connection_pool_closed")
