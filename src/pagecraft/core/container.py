"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from pagecraft.blocks import BlockRegistry, create_default_registry
from pagecraft.pipeline import OutputCompiler, TemplateOutputCompiler, PageGenerator
from .config import Settings, get_settings
from .logging_config import configure_logging


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings, falling back to the environment."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_block_registry(self) -> BlockRegistry:
        """Provide registry with the default block library."""
        return create_default_registry()

    @singleton
    @provider
    def provide_output_compiler(self, settings: Settings) -> OutputCompiler:
        """Provide the jinja2 output compiler."""
        return TemplateOutputCompiler(
            default_title=settings.default_title,
            default_description=settings.default_description,
        )

    @singleton
    @provider
    def provide_page_generator(
        self, registry: BlockRegistry, output_compiler: OutputCompiler, settings: Settings
    ) -> PageGenerator:
        """Provide page generator with all dependencies."""
        return PageGenerator(
            registry=registry,
            output_compiler=output_compiler,
            settings=settings,
        )


def create_container(settings: Settings | None = None) -> Injector:
    """Configure logging from settings and create the injector."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    return Injector([CoreModule(settings)])
