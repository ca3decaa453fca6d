"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tplresolve.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tplresolve.config.settings import TplSettings
    from tplresolve.services.factory import ResolverFactory
    from tplresolve.services.result import ServiceResult
    from tplresolve.services.templates import TemplateService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Repositories are built
    lazily on first use so ``--help`` and ``--version`` never load seed data.
    """

    def __init__(self, settings: TplSettings) -> None:
        self.settings = settings
        self._factory: ResolverFactory | None = None

        from tplresolve.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def factory(self) -> ResolverFactory:
        """The resolver factory (wired lazily from ``[repository]``)."""
        if self._factory is None:
            from tplresolve.infrastructure.catalog import Catalog
            from tplresolve.services.factory import ResolverFactory

            try:
                catalog = Catalog.from_config(self.settings.repository)
            except (OSError, ValueError) as exc:
                raise click.ClickException(f"Cannot load repositories: {exc}") from exc
            self._factory = ResolverFactory.from_catalog(catalog)
        return self._factory

    @property
    def service(self) -> TemplateService:
        from tplresolve.services.templates import TemplateService

        return TemplateService(self.factory)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
