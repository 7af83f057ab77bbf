# tests/test_color_cache.py
"""ColorCache: memoization, pass-through of unparseable literals, thread safety."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from svg_invert.color.cache import CacheInfo, ColorCache
from svg_invert.errors import UnparseableColor


class CountingInverter:
    """Stand-in inverter that records every call."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)
        self._lock = threading.Lock()

    def __call__(self, literal: str) -> str:
        with self._lock:
            self.calls.append(literal)
        if literal in self.fail_on:
            raise UnparseableColor(literal)
        return f"inv({literal})"


@pytest.fixture
def inverter():
    return CountingInverter(fail_on={"bogus"})


@pytest.fixture
def cache(inverter):
    return ColorCache(inverter)


def describe_lookup_or_compute():

    def it_computes_on_first_lookup(cache, inverter):
        assert cache.lookup_or_compute("#FF0000") == "inv(#FF0000)"
        assert inverter.calls == ["#FF0000"]

    def it_does_not_recompute_on_hit(cache, inverter):
        first = cache.lookup_or_compute("#FF0000")
        for _ in range(5):
            assert cache.lookup_or_compute("#FF0000") == first
        assert inverter.calls == ["#FF0000"]

    def it_keys_on_the_exact_literal(cache, inverter):
        cache.lookup_or_compute("#ff0000")
        cache.lookup_or_compute("#FF0000")
        cache.lookup_or_compute("red")
        assert inverter.calls == ["#ff0000", "#FF0000", "red"]
        assert len(cache) == 3

    def it_caches_failures_as_pass_through(cache, inverter):
        assert cache.lookup_or_compute("bogus") == "bogus"
        assert cache.lookup_or_compute("bogus") == "bogus"
        assert inverter.calls == ["bogus"]
        assert "bogus" in cache

    def it_uses_the_real_inverter_by_default():
        real = ColorCache()
        assert real.lookup_or_compute("#000000") == "#FFFFFFFF"
        assert real.lookup_or_compute("currentColor") == "currentColor"
        assert real.lookup_or_compute("not-a-color") == "not-a-color"


def describe_info():

    def it_counts_hits_and_misses(cache):
        cache.lookup_or_compute("#FF0000")
        cache.lookup_or_compute("#FF0000")
        cache.lookup_or_compute("#00FF00")
        assert cache.info() == CacheInfo(hits=1, misses=2, size=2)

    def it_starts_empty(cache):
        assert cache.info() == CacheInfo(0, 0, 0)
        assert len(cache) == 0
        assert "ColorCache(size=0" in repr(cache)


def describe_concurrency():

    def it_converges_to_one_value_per_literal(inverter):
        cache = ColorCache(inverter)
        literals = [f"#{i:06X}" for i in range(50)] * 20

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(cache.lookup_or_compute, literals))

        assert results == [f"inv({lit})" for lit in literals]
        assert len(cache) == 50
        # duplicates are possible under a race, but bounded by the workers
        assert 50 <= len(inverter.calls) <= 50 * 8

    def it_returns_the_stored_value_after_a_racing_miss():
        # the outer miss computes "outer" while a nested miss stores "inner" first
        cache = None
        calls = []

        def inverter(literal):
            calls.append(literal)
            if len(calls) == 1:
                assert cache.lookup_or_compute(literal) == "inner"
                return "outer"
            return "inner"

        cache = ColorCache(inverter)
        assert cache.lookup_or_compute("x") == "inner"
        assert cache.lookup_or_compute("x") == "inner"
        assert calls == ["x", "x"]
