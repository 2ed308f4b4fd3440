"""End-to-end tests for the page generator."""

import logging

import pytest

from pagecraft.blocks import BlockRegistry
from pagecraft.core import PreconditionError, Settings, create_container
from pagecraft.canvas import Canvas
from pagecraft.models import BlockInstance, GenerationResult, PageSettings, Theme
from pagecraft.pipeline import OutputCompiler, PageGenerator
from pagecraft.pipeline.output import NO_JS


@pytest.mark.integration
class TestGenerate:
    """Full generation pass."""

    def test_landing_page(self, generator, landing_blocks, theme, page_settings):
        result = generator.generate(landing_blocks, theme, page_settings)

        assert isinstance(result, GenerationResult)
        assert result.warnings == []
        assert result.diagnostics == []
        assert result.html.index("cs-navbar") < result.html.index("cs-hero") < result.html.index("cs-footer")
        assert "Welcome" in result.html
        assert "/* --- Navbar --- */" in result.css
        assert "cs-faq__q" in result.js
        assert "<title>Test Page</title>" in result.html

    def test_empty_canvas(self, generator, registry, theme, page_settings):
        result = generator.generate([], theme, page_settings)

        assert "Consider adding a navbar block." in result.warnings
        assert "Consider adding a footer block." in result.warnings
        assert result.js == NO_JS
        assert "<section" not in result.html and "<nav" not in result.html
        assert registry.base_stylesheet() in result.css
        assert "--primary: #2563EB;" in result.css
        assert "/* --- " not in result.css

    def test_duplicate_blocks_share_css(self, generator):
        result = generator.generate([BlockInstance(type_id="hero")] * 3)
        assert result.html.count('class="cs-hero"') == 3
        assert result.css.count("/* --- Hero Section --- */") == 1

    def test_unknown_block_is_diagnosed(self, generator):
        blocks = [
            BlockInstance(type_id="navbar"),
            BlockInstance(type_id="carousel", instance_id="blk_x"),
            BlockInstance(type_id="footer"),
        ]
        result = generator.generate(blocks)

        assert result.warnings == []
        [diag] = result.diagnostics
        assert diag.type_id == "carousel"
        assert diag.instance_id == "blk_x"
        assert "cs-footer" in result.html

    def test_warnings_do_not_block_generation(self, generator):
        result = generator.generate([BlockInstance(type_id="footer"), BlockInstance(type_id="navbar")])
        assert result.warnings == ["Footer should be the last block.", "Navbar should be the first block."]
        assert "cs-navbar" in result.html

    def test_accepts_mappings(self, generator):
        result = generator.generate(
            [{"id": "hero", "config": {"title": "From dict"}}],
            theme={"mode": "dark"},
            page_settings={"animations": False, "custom_key": 1},
        )
        assert "From dict" in result.html
        assert 'data-theme="dark"' in result.html

    @pytest.mark.parametrize("bad", [
        [{"type_id": "hero", "config": {"title": None}}],
        [{"config": {}}],
        ["hero"],
        "hero",
    ])
    def test_invalid_instances(self, generator, bad):
        with pytest.raises(PreconditionError):
            generator.generate(bad)

    def test_invalid_theme(self, generator):
        with pytest.raises(PreconditionError):
            generator.generate([], theme={"radius": "huge"})

    def test_input_is_snapshotted(self, generator):
        config = {"title": "Before"}
        blocks = [{"type_id": "hero", "config": config}]

        class MutatingCompiler:
            def __init__(self, inner):
                self.inner = inner

            def compile_full(self, tree, theme, settings):
                config["title"] = "After"
                blocks.append({"type_id": "footer"})
                return self.inner.compile_full(tree, theme, settings)

            def compile_for_preview(self, tree, theme, settings):
                return self.inner.compile_for_preview(tree, theme, settings)

        mutating = PageGenerator(generator.registry, MutatingCompiler(generator.output_compiler))
        result = mutating.generate(blocks)
        assert "Before" in result.html
        assert "cs-footer" not in result.html


@pytest.mark.integration
class TestPreview:
    """Self-contained preview."""

    def test_inlines_css(self, generator, landing_blocks, theme, page_settings):
        doc = generator.preview(landing_blocks, theme, page_settings)
        assert "<style>" in doc
        assert 'href="styles.css"' not in doc
        assert 'src="script.js"' not in doc
        assert "cs-faq__q" in doc

    def test_matches_generated_body(self, generator, landing_blocks):
        full = generator.generate(landing_blocks)
        doc = generator.preview(landing_blocks)
        assert full.css in doc


@pytest.mark.integration
class TestImportExport:
    """DSL import and export."""

    def test_import_applies_once(self, generator, sample_dsl):
        calls = []
        errors = generator.import_dsl(sample_dsl, calls.append)

        assert errors == []
        assert len(calls) == 1
        assert [b.type_id for b in calls[0]] == ["navbar", "hero", "features", "pricing", "footer"]

    def test_malformed_import_leaves_canvas_untouched(self, generator, canvas):
        canvas.add_block("navbar")
        canvas.add_block("footer")
        before = canvas.blocks

        errors = generator.import_dsl("navbar { title:", canvas.replace_blocks)

        assert errors
        assert canvas.blocks == before

    def test_import_into_canvas(self, generator, canvas, sample_dsl):
        canvas.add_block("cta")
        assert generator.import_dsl(sample_dsl, canvas.replace_blocks) == []
        assert [b.type_id for b in canvas.blocks][0] == "navbar"
        assert all(b.instance_id for b in canvas.blocks)

    def test_import_respects_length_cap(self, registry, output_compiler, settings):
        capped = PageGenerator(registry, output_compiler, settings.model_copy(update={"max_source_length": 8}))
        calls = []
        errors = capped.import_dsl("navbar hero footer", calls.append)
        assert errors and not calls

    def test_export_import_round_trip(self, generator, canvas):
        canvas.add_block("navbar", config={"brand": "Acme"})
        canvas.add_block("pricing", config={"featured": 2})
        canvas.add_block("footer", config={"year": 2024})

        text = generator.export_dsl(canvas.blocks)
        imported = []
        assert generator.import_dsl(text, imported.extend) == []
        assert [b.structure() for b in imported] == [b.structure() for b in canvas.blocks]

    def test_export_rejects_unrepresentable(self, generator):
        with pytest.raises(ValueError):
            generator.export_dsl([BlockInstance(type_id="x", config={"v": float("nan")})])


@pytest.mark.integration
class TestValidateAndResolve:
    """Pass-through operations."""

    def test_validate(self, generator):
        assert generator.validate([{"id": "hero"}]) == [
            "Consider adding a footer block.",
            "Consider adding a navbar block.",
        ]

    def test_resolve(self, generator, landing_blocks):
        tree = generator.resolve(landing_blocks)
        assert tree.meta.has_nav and tree.meta.has_footer
        assert tree.meta.type_ids == ("navbar", "hero", "faq", "footer")

    def test_custom_landmarks_from_settings(self, registry, output_compiler, settings):
        custom = PageGenerator(registry, output_compiler, settings.model_copy(update={"nav_block_type": "hero"}))
        assert custom.validate([{"id": "hero"}, {"id": "footer"}]) == []


@pytest.mark.integration
class TestContainer:
    """Dependency injection wiring."""

    def test_container_provides_generator(self, settings):
        container = create_container(settings)
        generator = container.get(PageGenerator)

        assert generator is container.get(PageGenerator)
        assert generator.registry is container.get(BlockRegistry)
        assert generator.output_compiler is container.get(OutputCompiler)
        assert "hero" in container.get(BlockRegistry)

    def test_container_applies_log_level(self):
        create_container(Settings(log_level="WARNING"))
        assert logging.getLogger("pagecraft").level == logging.WARNING

        create_container(Settings(log_level="DEBUG"))
        assert logging.getLogger("pagecraft").level == logging.DEBUG

    def test_container_generates(self):
        generator = create_container().get(PageGenerator)
        result = generator.generate([BlockInstance(type_id="navbar"), BlockInstance(type_id="footer")])
        assert result.warnings == []

    def test_canvas_with_container_registry(self):
        container = create_container()
        canvas = Canvas(container.get(BlockRegistry))
        canvas.add_block("hero")
        result = container.get(PageGenerator).generate(canvas.blocks, Theme(), PageSettings())
        assert "cs-hero" in result.html
