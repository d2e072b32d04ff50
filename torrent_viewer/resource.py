"""
Single-shot asynchronous cache of the daemon's torrent list.

A TorrentResource loads the torrent list once, the first time its result is
observed, and keeps the outcome for as long as it lives. Observers never
block: while the load runs they see Pending and can await ``wait()`` to be
told when the result has settled. There is no refresh and no polling; a new
load needs a new resource.

The gateway is synchronous, so the call runs in a thread pool executor.
"""

import asyncio
from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .base_client import BaseTorrentGateway
from .errors import FetchError, ProtocolError
from .logger import logger
from .models import TorrentView, normalize


@dataclass(frozen=True)
class Pending:
    """The load has not settled yet."""


@dataclass(frozen=True)
class Ready:
    """The load succeeded."""
    torrents: Tuple[TorrentView, ...] = ()


@dataclass(frozen=True)
class Failed:
    """The load failed."""
    error: FetchError


FetchResult = Union[Pending, Ready, Failed]

PENDING = Pending()


class TorrentResource:
    """
    Owns the one load of the torrent list for a page session.

    Args:
        gateway: Gateway used for the load
        on_settle: Called once with the Ready or Failed result
        executor: Executor for the blocking gateway call (default executor if None)
    """

    def __init__(
        self,
        gateway: BaseTorrentGateway,
        on_settle: Optional[Callable[[FetchResult], None]] = None,
        executor: Optional[Executor] = None
    ):
        self._gateway = gateway
        self._on_settle = on_settle
        self._executor = executor
        self._result: FetchResult = PENDING
        self._task: Optional[asyncio.Task] = None
        self._settled = asyncio.Event()
        self._closed = False

    @property
    def result(self) -> FetchResult:
        """Current result; the first read starts the load."""
        self._start()
        return self._result

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _start(self) -> None:
        if self._task is None and not self._closed:
            self._task = asyncio.get_running_loop().create_task(self._load())

    async def _load(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            records = await loop.run_in_executor(self._executor, self._gateway.fetch_torrents)
        except FetchError as e:
            result = Failed(error=e)
        except Exception as e:
            logger.exception("Unexpected error while fetching torrents")
            result = Failed(error=ProtocolError(f"Unexpected error while fetching torrents: {e}"))
        else:
            result = Ready(torrents=tuple(normalize(record) for record in records))
        finally:
            self._settled.set()

        if self._closed:
            logger.debug("Discarding torrent list for a closed session")
            return

        self._result = result

        if isinstance(result, Failed):
            logger.error(f"Torrent list unavailable: {result.error}")
        else:
            logger.debug(f"Torrent list ready ({len(result.torrents)} torrents)")

        if self._on_settle is not None:
            self._on_settle(result)

    async def wait(self) -> FetchResult:
        """Start the load if needed and wait until it settles."""
        self._start()
        if self._closed:
            return self._result
        await self._settled.wait()
        return self._result

    def close(self) -> None:
        """Tear down the resource, discarding any load still in flight."""
        if self._closed:
            return
        self._closed = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        # Release anyone blocked in wait()
        self._settled.set()
