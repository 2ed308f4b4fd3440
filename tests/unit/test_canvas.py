"""Tests for the caller-side canvas."""

import threading

import pytest
from pydantic import ValidationError

from pagecraft.models import BlockInstance, GeneratedOutput


@pytest.mark.unit
class TestCanvas:
    """Block list operations."""

    def test_add_uses_defaults(self, canvas, registry):
        instance_id = canvas.add_block("hero", config={"title": "Hi"})
        block = canvas.get_block(instance_id)

        assert block.type_id == "hero"
        assert block.config["title"] == "Hi"
        assert block.config["cta"] == registry.lookup("hero").default_config["cta"]

    def test_add_after(self, canvas):
        first = canvas.add_block("navbar")
        canvas.add_block("footer")
        canvas.add_block("hero", after=first)
        assert [b.type_id for b in canvas.blocks] == ["navbar", "hero", "footer"]

    def test_add_unknown(self, canvas):
        with pytest.raises(KeyError):
            canvas.add_block("ghost")
        with pytest.raises(KeyError):
            canvas.add_block("hero", after="blk_missing")

    def test_config_keys_named_like_parameters(self, canvas):
        instance_id = canvas.add_block("hero", config={"after": "x", "type_id": "y"})
        block = canvas.get_block(instance_id)

        assert block.type_id == "hero"
        assert block.config["after"] == "x"
        assert block.config["type_id"] == "y"
        assert len(canvas) == 1

    def test_remove(self, canvas):
        instance_id = canvas.add_block("hero")
        assert canvas.remove_block(instance_id) is True
        assert canvas.remove_block(instance_id) is False
        assert len(canvas) == 0

    def test_move(self, canvas):
        a = canvas.add_block("navbar")
        b = canvas.add_block("hero")

        assert canvas.move_block(b, "up") is True
        assert [x.instance_id for x in canvas.blocks] == [b, a]
        assert canvas.move_block(b, "up") is False
        assert canvas.move_block(a, "down") is False
        with pytest.raises(ValueError):
            canvas.move_block(a, "sideways")

    def test_update_config(self, canvas):
        instance_id = canvas.add_block("hero")
        assert canvas.update_config(instance_id, "title", "New") is True
        assert canvas.get_block(instance_id).config["title"] == "New"
        assert canvas.update_config("blk_missing", "title", "x") is False
        with pytest.raises(ValidationError):
            canvas.update_config(instance_id, "title", None)

    def test_snapshot_is_immutable(self, canvas):
        canvas.add_block("hero")
        snapshot = canvas.blocks
        canvas.add_block("footer")
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_replace_assigns_ids(self, canvas):
        canvas.add_block("hero")
        canvas.replace_blocks([BlockInstance(type_id="cta"), BlockInstance(type_id="faq", instance_id="keep")])
        blocks = canvas.blocks

        assert [b.type_id for b in blocks] == ["cta", "faq"]
        assert blocks[0].instance_id.startswith("blk_")
        assert blocks[1].instance_id == "keep"

    def test_clear_and_generated(self, canvas):
        canvas.add_block("hero")
        canvas.clear()
        assert canvas.blocks == ()

        assert canvas.generated is None
        output = GeneratedOutput(html="<p>", css="", js="")
        canvas.set_generated(output)
        assert canvas.generated == output

    def test_concurrent_adds(self, canvas):
        def add_many():
            for _ in range(50):
                canvas.add_block("hero")

        threads = [threading.Thread(target=add_many) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(canvas) == 200
        assert len({b.instance_id for b in canvas.blocks}) == 200
