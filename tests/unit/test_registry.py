"""Tests for the block registry."""

import pytest

from pagecraft.blocks import BlockDefinition, BlockRegistry


def make_block(type_id="demo", category="content", **kwargs):
    return BlockDefinition(
        type_id=type_id,
        name=type_id.title(),
        category=category,
        html=lambda c: f"<div>{c.get('text', '')}</div>",
        **kwargs,
    )


@pytest.mark.unit
class TestBlockRegistry:
    """Registration and lookup."""

    def test_register_and_lookup(self):
        registry = BlockRegistry()
        block = make_block()
        registry.register(block)

        assert registry.lookup("demo") is block
        assert "demo" in registry
        assert len(registry) == 1

    def test_lookup_missing(self):
        assert BlockRegistry().lookup("nope") is None

    def test_lookup_does_not_mutate(self):
        registry = BlockRegistry()
        registry.register(make_block())
        registry.lookup("demo")
        registry.lookup("missing")
        assert registry.get_stats()["type_ids"] == ["demo"]

    def test_reregister_replaces(self):
        registry = BlockRegistry()
        registry.register(make_block(description="old"))
        registry.register(make_block(description="new"))
        assert len(registry) == 1
        assert registry.lookup("demo").description == "new"

    def test_unregister(self):
        registry = BlockRegistry()
        registry.register(make_block())
        registry.unregister("demo")
        registry.unregister("demo")
        assert registry.lookup("demo") is None

    def test_list_all_by_category(self):
        registry = BlockRegistry()
        registry.register(make_block("a", category="layout"))
        registry.register(make_block("b"))
        registry.register(make_block("c", category="layout"))

        assert [b.type_id for b in registry.list_all()] == ["a", "b", "c"]
        assert [b.type_id for b in registry.list_all("layout")] == ["a", "c"]
        assert registry.categories() == ["content", "layout"]

    def test_base_stylesheet(self):
        registry = BlockRegistry(base_css="body{}")
        assert registry.base_stylesheet() == "body{}"
        registry.set_base_stylesheet("html{}")
        assert registry.base_stylesheet() == "html{}"

    def test_stats(self):
        registry = BlockRegistry()
        registry.register(make_block("a", category="layout"))
        registry.register(make_block("b"))
        stats = registry.get_stats()
        assert stats["total_blocks"] == 2
        assert stats["categories"] == {"layout": 1, "content": 1}


@pytest.mark.unit
class TestCreateInstance:
    """Instance creation from definitions."""

    def test_defaults_and_overrides(self):
        registry = BlockRegistry()
        registry.register(make_block(default_config={"text": "hi", "n": 1}))

        instance = registry.create_instance("demo", n=2)
        assert instance.type_id == "demo"
        assert instance.config == {"text": "hi", "n": 2}

    def test_override_keys_may_shadow_parameter_names(self):
        registry = BlockRegistry()
        registry.register(make_block())

        instance = registry.create_instance("demo", type_id="other")
        assert instance.type_id == "demo"
        assert instance.config == {"type_id": "other"}

    def test_fresh_block_ids(self):
        registry = BlockRegistry()
        registry.register(make_block())
        a = registry.create_instance("demo")
        b = registry.create_instance("demo")

        assert a.instance_id != b.instance_id
        assert a.instance_id.startswith("blk_")

    def test_unknown_type(self):
        with pytest.raises(KeyError):
            BlockRegistry().create_instance("nope")


@pytest.mark.unit
class TestBlockDefinition:
    """Template capability interface."""

    def test_render_success(self):
        result = make_block().render("html", {"text": "x"})
        assert result.unwrap() == "<div>x</div>"

    def test_default_css_and_js_are_empty(self):
        block = make_block()
        assert block.render("css", {}).unwrap() == ""
        assert block.render("js", {}).unwrap() == ""

    def test_render_failure_is_captured(self):
        def boom(config):
            raise RuntimeError("template exploded")

        result = make_block(css=boom).render("css", {})
        assert isinstance(result.failure(), RuntimeError)

    def test_render_receives_a_copy(self):
        seen = {}

        def grab(config):
            config["mutated"] = True
            seen.update(config)
            return ""

        original = {"a": 1}
        make_block(js=grab).render("js", original)
        assert original == {"a": 1}
        assert seen["mutated"] is True
