"""atelier-web - serve the Atelier API."""

import click
import uvicorn


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8765, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def web(host: str, port: int, reload: bool) -> None:
    """Start the Atelier API server."""
    click.echo("Atelier API")
    click.echo(f"Starting web server on http://{host}:{port}")
    uvicorn.run(
        "atelier.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    web()
