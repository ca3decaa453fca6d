"""serve — run the HTTP API with uvicorn."""

from __future__ import annotations

import click

from tplresolve.commands._base import TplCommand


@click.command(
    cls=TplCommand,
    examples="""\
  # Serve on the configured address ([api] host/port, default 127.0.0.1:8000)
  tplresolve serve

  # Custom host/port
  tplresolve serve --host 0.0.0.0 --port 9000

  # Seeded repositories that return 404 on a miss
  TPLRESOLVE_REPOSITORY__BACKEND=memory tplresolve serve""",
)
@click.option("--host", default=None, help="Bind address (default: [api] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [api] port).")
@click.pass_obj
def serve(app: object, host: str | None, port: int | None) -> None:
    """Serve POST /templates/{product,model,rate} over HTTP."""
    import uvicorn

    from tplresolve.api.app import create_app
    from tplresolve.commands._context import AppContext

    assert isinstance(app, AppContext)
    api = app.settings.api
    server_app = create_app(factory=app.factory, settings=app.settings)
    uvicorn.run(
        server_app,
        host=host if host is not None else api.host,
        port=port if port is not None else api.port,
        log_level=api.log_level.lower(),
        log_config=None,
        access_log=app.settings.verbose,
    )
