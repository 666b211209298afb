"""Tests for LoadController: caching, supersession, pagination and errors."""

import asyncio

import pytest

from asyncselect.application.load_controller import LoadController, RequestOutcome
from asyncselect.application.result_cache import ResultCache
from asyncselect.domain.events import LoadFailed, LoadStateChanged, RequestSuperseded
from asyncselect.domain.types import CacheEntry


def make_controller(provider, event_bus=None, **kwargs) -> LoadController:
    return LoadController(provider, event_bus=event_bus, **kwargs)


class TestCaching:
    def test_second_load_is_served_from_cache(self, provider):
        controller = make_controller(provider)

        controller.load("q")
        provider.calls[0].resolve(["a", "b"])
        first_state = controller.state

        assert controller.load("q") is None
        assert len(provider.calls) == 1
        assert controller.state == first_state
        assert controller.state.options == ("a", "b")

    def test_cached_page_covering_request_skips_provider(self, provider):
        controller = make_controller(provider, pagination=True)

        controller.load("x", 1)
        provider.calls[0].resolve(["o1"])

        assert controller.load("x", 1) is None
        assert len(provider.calls) == 1

    def test_cache_hit_restores_options_without_loading_flag(self, provider):
        controller = make_controller(provider)
        controller.load("a")
        provider.calls[0].resolve(["a1"])
        controller.load("b")
        provider.calls[1].resolve(["b1"])

        controller.load("a")

        assert controller.state.options == ("a1",)
        assert controller.state.is_loading is False

    def test_disabled_cache_always_hits_provider(self, provider):
        controller = make_controller(provider, cache=ResultCache(False))

        controller.load("q")
        provider.calls[0].resolve(["a"])
        controller.load("q")

        assert provider.queries == ["q", "q"]

    def test_response_overwrites_cache_entry(self, provider):
        cache = ResultCache()
        controller = make_controller(provider, cache=cache, pagination=True)

        controller.load("x", 1)
        provider.calls[0].resolve(["o1", "o2"])
        controller.load("x", 2)
        provider.calls[1].resolve(["o3"])

        assert cache.get("x") == CacheEntry(page=2, options=("o1", "o2", "o3"), has_reached_last_page=False)


class TestSupersession:
    def test_latest_request_wins_when_older_resolves_last(self, provider):
        controller = make_controller(provider)

        first = controller.load("a")
        second = controller.load("b")
        provider.calls[1].resolve(["b1"])
        provider.calls[0].resolve(["a1"])

        assert controller.state.options == ("b1",)
        assert first.outcome is RequestOutcome.DISCARDED
        assert second.outcome is RequestOutcome.APPLIED
        assert controller.cache.get("a") is None

    def test_superseded_response_arriving_first_is_ignored(self, provider):
        controller = make_controller(provider)

        controller.load("a")
        controller.load("b")
        provider.calls[0].resolve(["a1"])

        assert controller.state.options == ()
        assert controller.state.is_loading is True

        provider.calls[1].resolve(["b1"])
        assert controller.state.options == ("b1",)
        assert controller.state.is_loading is False

    def test_duplicate_callback_applies_once(self, provider):
        controller = make_controller(provider)

        controller.load("q")
        provider.calls[0].resolve(["first"])
        provider.calls[0].resolve(["second"])

        assert controller.state.options == ("first",)
        assert controller.cache.get("q").options == ("first",)

    def test_superseded_event_published(self, provider, event_bus, recorder):
        controller = make_controller(provider, event_bus=event_bus)

        controller.load("a")
        controller.load("b")

        superseded = recorder.of_type(RequestSuperseded)
        assert [(event.query, event.generation) for event in superseded] == [("a", 1)]

    def test_generation_increases_per_issued_request(self, provider):
        controller = make_controller(provider)

        controller.load("a")
        controller.load("b")

        assert controller.generation == 2
        assert controller.active_generation == 2
        provider.calls[1].resolve([])
        assert controller.active_generation is None


class TestPagination:
    def test_pages_accumulate(self, provider):
        controller = make_controller(provider, pagination=True)

        controller.load("x", 1)
        provider.calls[0].resolve(["o1", "o2"])
        controller.load("x", 2)

        assert provider.calls[1].page == 2
        assert controller.state.is_loading is True
        assert controller.state.is_loading_page is True
        assert controller.state.options == ("o1", "o2")

        provider.calls[1].resolve(["o3"])

        assert controller.state.options == ("o1", "o2", "o3")
        assert controller.state.current_page == 2
        assert controller.state.is_loading_page is False

    def test_empty_page_marks_last_page(self, provider):
        controller = make_controller(provider, pagination=True)

        controller.load("x", 1)
        provider.calls[0].resolve(["o1", "o2"])
        controller.load("x", 2)
        provider.calls[1].resolve([])

        assert controller.cache.get("x").has_reached_last_page is True
        assert controller.load("x", 3) is None
        assert len(provider.calls) == 2
        assert controller.state.options == ("o1", "o2")

    def test_provider_called_without_page_when_not_paginating(self, provider):
        controller = make_controller(provider)

        controller.load("x")

        assert provider.calls[0].page is None

    def test_fresh_query_is_not_a_page_load(self, provider):
        controller = make_controller(provider, pagination=True)

        controller.load("x", 1)

        assert controller.state.is_loading is True
        assert controller.state.is_loading_page is False


class TestLoadingFlags:
    def test_synchronous_provider_never_shows_loading(self, event_bus, recorder):
        def provider(query, callback):
            callback(None, {"options": [query.upper()]})

        controller = make_controller(provider, event_bus=event_bus)
        request = controller.load("q")

        assert request.outcome is RequestOutcome.APPLIED
        assert controller.state.options == ("Q",)
        assert not any(event.state.is_loading for event in recorder.of_type(LoadStateChanged))

    def test_loading_flags_kept_while_superseding(self, provider):
        controller = make_controller(provider)

        controller.load("a")
        controller.load("b")

        assert controller.state.is_loading is True
        assert controller.state.is_loading_page is False


class TestErrors:
    def test_provider_error_collapses_to_empty_options(self, provider, event_bus, recorder):
        controller = make_controller(provider, event_bus=event_bus)
        controller.reset_options(["stale"])
        error = RuntimeError("backend down")

        controller.load("q")
        provider.calls[0].reject(error)

        assert controller.state.options == ()
        assert controller.state.is_loading is False
        assert controller.state.error is error
        failures = recorder.of_type(LoadFailed)
        assert len(failures) == 1
        assert failures[0].query == "q"
        assert failures[0].error is error

    def test_page_error_keeps_loaded_pages(self, provider):
        controller = make_controller(provider, pagination=True)

        controller.load("x", 1)
        provider.calls[0].resolve(["o1"])
        controller.load("x", 2)
        provider.calls[1].reject(ValueError("boom"))

        assert controller.state.options == ("o1",)
        assert controller.state.current_page == 2

    def test_provider_raising_synchronously_is_absorbed(self):
        def provider(query, callback):
            raise ConnectionError("unreachable")

        controller = make_controller(provider)
        request = controller.load("q")

        assert request.outcome is RequestOutcome.APPLIED
        assert isinstance(controller.state.error, ConnectionError)
        assert controller.state.is_loading is False

    def test_success_clears_previous_error(self, provider):
        controller = make_controller(provider, cache=ResultCache(False))

        controller.load("q")
        provider.calls[0].reject(RuntimeError("once"))
        controller.load("q")
        provider.calls[1].resolve(["ok"])

        assert controller.state.error is None
        assert controller.state.options == ("ok",)

    def test_missing_options_key_means_empty(self, provider):
        controller = make_controller(provider)

        controller.load("q")
        provider.calls[0].callback(None, {})

        assert controller.state.options == ()
        assert controller.state.error is None


class TestAwaitableProviders:
    @pytest.mark.asyncio
    async def test_awaitable_result_is_applied(self):
        async def provider(query, callback):
            await asyncio.sleep(0)
            return {"options": [f"{query}-1", f"{query}-2"]}

        controller = make_controller(provider)
        request = controller.load("q")

        assert controller.state.is_loading is True
        assert await request.wait() is RequestOutcome.APPLIED
        assert controller.state.options == ("q-1", "q-2")
        assert controller.state.is_loading is False

    @pytest.mark.asyncio
    async def test_awaitable_rejection_routes_through_callback(self, event_bus, recorder):
        async def provider(query, callback):
            raise TimeoutError("slow")

        controller = make_controller(provider, event_bus=event_bus)
        request = controller.load("q")
        await request.wait()

        assert controller.state.options == ()
        assert isinstance(controller.state.error, TimeoutError)
        assert len(recorder.of_type(LoadFailed)) == 1

    @pytest.mark.asyncio
    async def test_callback_and_awaitable_apply_once(self):
        async def late():
            await asyncio.sleep(0)
            return {"options": ["from-awaitable"]}

        def provider(query, callback):
            callback(None, {"options": ["from-callback"]})
            return late()

        controller = make_controller(provider)
        request = controller.load("q")
        await asyncio.sleep(0.01)

        assert request.outcome is RequestOutcome.APPLIED
        assert controller.state.options == ("from-callback",)

    @pytest.mark.asyncio
    async def test_slow_older_request_cannot_overwrite_newer(self):
        release_a = asyncio.Event()

        async def provider(query, callback):
            if query == "a":
                await release_a.wait()
            return {"options": [query]}

        controller = make_controller(provider)
        first = controller.load("a")
        second = controller.load("b")

        assert await second.wait() is RequestOutcome.APPLIED
        release_a.set()
        assert await first.wait() is RequestOutcome.DISCARDED
        await asyncio.sleep(0.01)

        assert controller.state.options == ("b",)
        assert controller.cache.get("a") is None


def test_clear_options_keeps_cache(provider):
    controller = make_controller(provider)
    controller.load("q")
    provider.calls[0].resolve(["a"])

    controller.clear_options()

    assert controller.state.options == ()
    assert controller.cache.get("q").options == ("a",)


def test_initial_options_are_visible(provider):
    controller = make_controller(provider, options=["seed"])

    assert controller.state.options == ("seed",)
    assert controller.state.current_page == 1


def test_awaitable_provider_without_running_loop_collapses_to_error():
    async def provider(query, callback):
        return {"options": ["never"]}

    controller = make_controller(provider)
    request = controller.load("q")

    assert request.outcome is RequestOutcome.APPLIED
    assert isinstance(controller.state.error, RuntimeError)
    assert controller.state.is_loading is False
    assert controller.state.options == ()
    assert controller.active_generation is None
