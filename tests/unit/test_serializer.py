"""Tests for DSL serialization and the compile/serialize round trip."""

import math

import pytest
from hypothesis import given, strategies as st

from pagecraft.core import DSLSerializationError
from pagecraft.dsl import compile_dsl, serialize_dsl
from pagecraft.dsl.serializer import EMPTY_DOCUMENT, quote
from pagecraft.models import BlockInstance, structurally_equal


@pytest.mark.unit
class TestSerialize:
    """Canonical output."""

    def test_empty_list(self):
        assert serialize_dsl([]) == "layout {\n  // Add blocks here\n}"
        assert serialize_dsl([]) == EMPTY_DOCUMENT

    def test_canonical_layout(self):
        text = serialize_dsl([
            BlockInstance(type_id="navbar", config={"brand": "MyApp", "sticky": True}),
            BlockInstance(type_id="hero"),
        ])
        assert text == 'layout {\n  navbar(brand: "MyApp", sticky: true)\n  hero()\n}'

    def test_value_formatting(self):
        text = serialize_dsl([BlockInstance(type_id="x", config={"i": -3, "f": 0.5, "b": False, "s": "q\"t"})])
        assert 'x(i: -3, f: 0.5, b: false, s: "q\\"t")' in text

    def test_non_identifier_keys_are_quoted(self):
        text = serialize_dsl([BlockInstance(type_id="x", config={"two words": 1, "true": 2, "": 3})])
        assert 'x("two words": 1, "true": 2, "": 3)' in text

    def test_accepts_mappings(self):
        text = serialize_dsl([{"id": "hero", "config": {"title": "Hi"}}])
        assert 'hero(title: "Hi")' in text

    def test_quote_control_characters(self):
        assert quote("a\x01b") == '"a\\u0001b"'
        assert quote("tab\tnew\nline") == '"tab\\tnew\\nline"'


@pytest.mark.unit
class TestPreconditions:
    """Values the DSL cannot express fail loudly."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_float(self, value):
        with pytest.raises(DSLSerializationError):
            serialize_dsl([BlockInstance(type_id="x", config={"v": value})])

    @pytest.mark.parametrize("type_id", ["my block", "true", "9lives", "a.b"])
    def test_type_id_must_be_identifier(self, type_id):
        with pytest.raises(DSLSerializationError):
            serialize_dsl([BlockInstance(type_id=type_id)])

    @pytest.mark.parametrize("value", [None, [1, 2], {"nested": 1}])
    def test_unsupported_values(self, value):
        with pytest.raises(DSLSerializationError):
            serialize_dsl([{"type_id": "x", "config": {"v": value}}])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            serialize_dsl([BlockInstance(type_id="my block")])

    def test_rejects_non_instances(self):
        with pytest.raises(DSLSerializationError):
            serialize_dsl(["hero"])


# ============================================================================
# Round trip
# ============================================================================

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_-]{0,12}", fullmatch=True).filter(
    lambda s: s not in ("true", "false")
)
keys = st.one_of(identifiers, st.text(max_size=12))
values = st.one_of(
    st.booleans(),
    st.integers(min_value=-(10**30), max_value=10**30),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=30),
)
instances = st.builds(
    lambda type_id, config: BlockInstance(type_id=type_id, config=config),
    identifiers,
    st.dictionaries(keys, values, max_size=6),
)


@pytest.mark.unit
@given(st.lists(instances, max_size=8))
def test_round_trip(blocks):
    """compile(serialize(L)) is structurally equal to L."""
    result = compile_dsl(serialize_dsl(blocks))
    assert result.errors == []
    assert structurally_equal(result.instances, blocks)


@pytest.mark.unit
@given(st.text())
def test_any_string_survives(value):
    block = BlockInstance(type_id="x", config={"v": value})
    result = compile_dsl(serialize_dsl([block]))
    assert result.instances[0].config["v"] == value


@pytest.mark.unit
def test_round_trip_keeps_value_types():
    block = BlockInstance(type_id="x", config={"i": 1, "f": 1.0, "b": True, "s": "1"})
    [back] = compile_dsl(serialize_dsl([block])).instances
    assert {k: type(v) for k, v in back.config.items()} == {"i": int, "f": float, "b": bool, "s": str}
