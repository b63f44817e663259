"""Tests for demos/ — registry discovery and every catalog entry.

Demos are run with ``FAST_DEMO_CONFIG`` (5% of the original timings).
Results are compared on ``DemoResult.data``, the serialized text.
"""

from __future__ import annotations

import importlib

import pytest

from core.config import DemoConfig
from demos.base import PRIMITIVES, Demo, DemoResult
from demos.registry import DemoRegistry, get_registry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _run(name: str, config: DemoConfig) -> DemoResult:
    demo = get_registry().get(name)
    assert demo is not None, f"demo {name!r} not registered"
    return await demo(config)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestDemoRegistry:
    def test_discovers_all_demos(self) -> None:
        registry = DemoRegistry()
        assert registry.discover() == 24
        assert len(registry) == 24

    def test_discovers_from_namespace_package(self) -> None:
        package = importlib.import_module("demos")
        assert getattr(package, "__file__", None) is None
        assert DemoRegistry().discover("demos") == 24

    def test_every_primitive_has_demos(self) -> None:
        registry = get_registry()
        for primitive in PRIMITIVES:
            assert registry.by_primitive(primitive), primitive

    def test_demo_counts_per_primitive(self) -> None:
        registry = get_registry()
        counts = {p: len(registry.by_primitive(p)) for p in PRIMITIVES}
        assert counts == {
            "filter": 6,
            "reduce": 6,
            "debounce": 1,
            "stringify": 6,
            "gather_all": 5,
        }

    def test_singleton(self) -> None:
        assert get_registry() is get_registry()

    def test_get_unknown_returns_none(self) -> None:
        assert get_registry().get("no_such_demo") is None

    def test_contains(self) -> None:
        assert "reduce_sum" in get_registry()

    def test_duplicate_registration_raises(self) -> None:
        registry = DemoRegistry()
        demo = get_registry().get("reduce_sum")
        registry.register(demo)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(demo)

    def test_list_demos_shape(self) -> None:
        entry = get_registry().list_demos()[0]
        assert set(entry) == {"name", "primitive", "title", "description", "source"}

    def test_discover_unknown_package_returns_zero(self) -> None:
        assert DemoRegistry().discover("no_such_package_xyz") == 0

    def test_abstract_base_not_registered(self) -> None:
        assert all(type(d) is not Demo for d in get_registry()._demos.values())


# ---------------------------------------------------------------------------
# Filter demos
# ---------------------------------------------------------------------------


class TestFilterDemos:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("filter_even_numbers", "[2,4,6,8,10]"),
            ("filter_long_words", '["banana","cherry","elderberry"]'),
            ("filter_numbers_from_mixed", "[1,2,3,4,5]"),
            ("filter_words_starting_with_b", '["banana"]'),
            ("filter_greater_than_five", "[6,7,8,9,10]"),
            ("filter_sparse_sequence", "[1,null,5]"),
        ],
    )
    async def test_result(self, name: str, expected: str, demo_config: DemoConfig) -> None:
        result = await _run(name, demo_config)
        assert result.success is True
        assert result.data == expected


# ---------------------------------------------------------------------------
# Reduce demos
# ---------------------------------------------------------------------------


class TestReduceDemos:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("reduce_sum", "15"),
            ("reduce_product", "120"),
            ("reduce_to_mapping", '{"1":1,"2":2,"3":3,"4":4,"5":5}'),
            ("reduce_sentence", '"hello world how are you"'),
            ("reduce_max", "5"),
        ],
    )
    async def test_result(self, name: str, expected: str, demo_config: DemoConfig) -> None:
        result = await _run(name, demo_config)
        assert result.success is True
        assert result.data == expected

    @pytest.mark.asyncio
    async def test_empty_without_seed_is_encoded_error(self, demo_config: DemoConfig) -> None:
        result = await _run("reduce_empty_without_seed", demo_config)
        assert result.success is False
        assert result.data is None
        assert result.error == (
            "EmptySequenceError: reduce of empty sequence with no initial value"
        )


# ---------------------------------------------------------------------------
# Debounce demo
# ---------------------------------------------------------------------------


class TestDebounceDemo:
    @pytest.mark.asyncio
    async def test_typing_burst_searches_once(self, demo_config: DemoConfig) -> None:
        result = await _run("debounce_typing_burst", demo_config)
        assert result.success is True
        assert result.data == '{"keystrokes":5,"searches":["react"]}'


# ---------------------------------------------------------------------------
# Stringify demos
# ---------------------------------------------------------------------------


class TestStringifyDemos:
    @pytest.mark.asyncio
    async def test_nested_arrays(self, demo_config: DemoConfig) -> None:
        result = await _run("stringify_nested_arrays", demo_config)
        # The demo returns text, which is serialized once more.
        assert result.data == '"[[1,2],[3,[4,5]],[6,[7,[8,9]]]]"'

    @pytest.mark.asyncio
    async def test_mixed_array_keeps_null_and_undefined(self, demo_config: DemoConfig) -> None:
        result = await _run("stringify_mixed_array", demo_config)
        assert result.success is True
        assert "null,undefined,true]" in result.data

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name",
        ["stringify_simple_object", "stringify_complex_object", "stringify_quoted_string"],
    )
    async def test_succeeds(self, name: str, demo_config: DemoConfig) -> None:
        result = await _run(name, demo_config)
        assert result.success is True
        assert result.data.startswith('"{')

    @pytest.mark.asyncio
    async def test_cyclic_is_encoded_error(self, demo_config: DemoConfig) -> None:
        result = await _run("stringify_cyclic", demo_config)
        assert result.success is False
        assert result.error.startswith("CyclicStructureError:")


# ---------------------------------------------------------------------------
# gather_all demos
# ---------------------------------------------------------------------------


class TestGatherAllDemos:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("gather_all_resolved", '["First","Second","Third"]'),
            ("gather_all_empty", "[]"),
            ("gather_all_mixed_types", '[42,{"name":"John","age":30},[1,2,3]]'),
        ],
    )
    async def test_result(self, name: str, expected: str, demo_config: DemoConfig) -> None:
        result = await _run(name, demo_config)
        assert result.success is True
        assert result.data == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["gather_all_with_rejection", "gather_all_rejected"])
    async def test_first_failure_reported(self, name: str, demo_config: DemoConfig) -> None:
        result = await _run(name, demo_config)
        assert result.success is False
        assert result.error == "RuntimeError: Second computation failed"

    @pytest.mark.asyncio
    async def test_metadata_has_elapsed(self, demo_config: DemoConfig) -> None:
        result = await _run("gather_all_empty", demo_config)
        assert result.metadata is not None
        assert result.metadata["elapsed_ms"] >= 0
