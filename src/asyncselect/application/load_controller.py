"""
Load controller: fetches options for a query and keeps only the latest answer.

Every call to :meth:`LoadController.load` that reaches the provider takes a
new generation number and becomes the single active request. A provider
response is applied only while its generation is still active, and applying
it clears the active slot. Older requests are never cancelled; whatever they
eventually report is dropped. The same check makes duplicate signals from one
request harmless (callback fired twice, or callback plus awaitable).
"""

from __future__ import annotations

import asyncio
import inspect
from enum import Enum
from typing import Any, Awaitable, Sequence

from asyncselect.application.reducer import extract_options, reduce_page
from asyncselect.application.result_cache import ResultCache
from asyncselect.domain.events import EventBus, LoadFailed, LoadStateChanged, RequestSuperseded
from asyncselect.domain.protocols import OptionsProvider
from asyncselect.domain.types import CacheEntry, LoadState, Option, as_options
from asyncselect.logger import get_logger

logger = get_logger("load_controller")


class RequestOutcome(str, Enum):
    PENDING = "pending"
    APPLIED = "applied"
    DISCARDED = "discarded"


class LoadRequest:
    """Handle for one provider call issued by the controller."""

    def __init__(self, generation: int, query: str, page: int) -> None:
        self.generation = generation
        self.query = query
        self.page = page
        self.outcome = RequestOutcome.PENDING
        self._settled = asyncio.Event()

    @property
    def done(self) -> bool:
        return self.outcome is not RequestOutcome.PENDING

    def settle(self, outcome: RequestOutcome) -> None:
        if self.done:
            return
        self.outcome = outcome
        self._settled.set()

    async def wait(self) -> RequestOutcome:
        """Wait until the response is applied or the request is superseded."""
        await self._settled.wait()
        return self.outcome

    def __repr__(self) -> str:
        return f"LoadRequest(generation={self.generation}, query={self.query!r}, page={self.page}, outcome={self.outcome.value})"


class LoadController:
    """Orchestrates provider calls, caching and pagination for one select control."""

    def __init__(
        self,
        provider: OptionsProvider,
        *,
        cache: ResultCache | None = None,
        pagination: bool = False,
        options: Sequence[Option] = (),
        event_bus: EventBus | None = None,
    ) -> None:
        """
        Args:
            provider: Data source queried for options
            cache: Result cache; a private in-memory one when omitted
            pagination: Accumulate successive pages of the same query
            options: Options visible before the first load
            event_bus: Bus receiving state events; a new one when omitted
        """
        self._provider = provider
        self.cache = cache if cache is not None else ResultCache()
        self.pagination = pagination
        self.event_bus = event_bus or EventBus()
        self._state = LoadState(options=as_options(options))
        self._generation = 0
        self._active_generation: int | None = None
        self._pending: LoadRequest | None = None
        self._watchers: set[asyncio.Future] = set()

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def active_generation(self) -> int | None:
        """Generation allowed to apply its response, or None when idle."""
        return self._active_generation

    def load(self, query: str, page: int = 1) -> LoadRequest | None:
        """
        Load options for ``query``, serving from cache where possible.

        Args:
            query: Normalized query
            page: Page to load; pages above 1 are appended to the visible options

        Returns:
            The issued request, or None when the cache fully served the call
        """
        entry = self.cache.get(query)
        if entry is not None:
            self._set_state(self._state.evolve(options=entry.options, current_page=entry.page, error=None))
            if not self.pagination or entry.page >= page or entry.has_reached_last_page:
                logger.debug(f"Served {query!r} page {page} from cache (cached page {entry.page})")
                return None

        request = self._issue(query, page)

        # A provider answering synchronously has already cleared the active slot
        if self._active_generation == request.generation and not self._state.is_loading:
            self._set_state(
                self._state.evolve(
                    is_loading=True,
                    is_loading_page=page > self._state.current_page,
                )
            )
        return request

    def clear_options(self) -> None:
        """Empty the visible options; cached results are kept."""
        self._set_state(self._state.evolve(options=()))

    def reset_options(self, options: Sequence[Option]) -> None:
        """Replace the visible options with a caller supplied list."""
        self._set_state(self._state.evolve(options=as_options(options)))

    def _issue(self, query: str, page: int) -> LoadRequest:
        self._generation += 1
        request = LoadRequest(self._generation, query, page)

        superseded = self._pending
        self._active_generation = request.generation
        self._pending = request
        if superseded is not None:
            superseded.settle(RequestOutcome.DISCARDED)
            logger.debug(f"Request {superseded.generation} ({superseded.query!r}) superseded by {request.generation}")
            self.event_bus.publish(
                RequestSuperseded(query=superseded.query, page=superseded.page, generation=superseded.generation)
            )

        def callback(error: BaseException | None = None, data: Any = None) -> None:
            self._respond(request, error, data)

        logger.debug(f"Issuing request {request.generation} for {query!r} page {page}")
        try:
            if self.pagination:
                result = self._provider(query, page, callback)
            else:
                result = self._provider(query, callback)
            if result is not None and inspect.isawaitable(result):
                self._watch(result, callback)
        except Exception as e:
            callback(e)
        return request

    def _watch(self, awaitable: Awaitable[Any], callback) -> None:
        """Route an awaitable's outcome through ``callback``.

        Raises:
            RuntimeError: If no event loop is running to drive the awaitable
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise
        future = asyncio.ensure_future(awaitable, loop=loop)
        self._watchers.add(future)

        def on_done(fut: asyncio.Future) -> None:
            self._watchers.discard(fut)
            if fut.cancelled():
                callback(asyncio.CancelledError())
            elif fut.exception() is not None:
                callback(fut.exception())
            else:
                callback(None, fut.result())

        future.add_done_callback(on_done)

    def _respond(self, request: LoadRequest, error: BaseException | None, data: Any) -> None:
        if self._active_generation != request.generation:
            logger.debug(
                f"Discarding response for request {request.generation} ({request.query!r}); "
                f"active generation is {self._active_generation}"
            )
            return

        self._active_generation = None
        self._pending = None

        options = () if error is not None else extract_options(data)
        has_reached_last_page = self.pagination and not options
        next_state = reduce_page(self._state, request.page, options, error)

        self.cache.set(
            request.query,
            CacheEntry(
                page=request.page,
                options=next_state.options,
                has_reached_last_page=has_reached_last_page,
            ),
        )
        logger.debug(
            f"Applied request {request.generation} for {request.query!r} page {request.page}: "
            f"{len(options)} new option(s), last_page={has_reached_last_page}"
        )
        self._set_state(next_state)
        request.settle(RequestOutcome.APPLIED)

        if error is not None:
            logger.warning(f"Options provider failed for {request.query!r} page {request.page}: {error!r}")
            self.event_bus.publish(LoadFailed(query=request.query, page=request.page, error=error))

    def _set_state(self, state: LoadState) -> None:
        previous = self._state
        self._state = state
        if state != previous or state.error is not previous.error:
            self.event_bus.publish(LoadStateChanged(state=state, previous=previous))
