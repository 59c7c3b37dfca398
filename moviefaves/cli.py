"""CLI entry point: run the favorites server or browse the catalog in the terminal."""
import asyncio
import logging

import click
import httpx
from rich.console import Console

from moviefaves import config

console = Console()

HELP_TEXT = """\
s <terms>   search the catalog
n / p       next / previous page
o <#>       open details for result #
a <#>       add result # to favorites
f           show favorites
x           close the detail window
c           click the detail window backdrop
q           quit"""


@click.group()
@click.version_option(package_name="moviefaves")
def cli():
    """moviefaves - search movies and keep a list of favorites."""
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s: %(name)s: %(message)s")


@cli.command()
@click.option("--host", default=config.API_HOST, show_default=True)
@click.option("--port", default=config.API_PORT, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str, port: int, reload: bool):
    """Run the favorites API and static client files."""
    import uvicorn

    uvicorn.run("moviefaves.api.app:app", host=host, port=port, reload=reload)


async def run_command(app, line: str) -> bool:
    """Execute one browse command. Returns False when the user quits."""
    from moviefaves.client.view import InteractionZone, ModalTarget

    command, _, arg = line.strip().partition(" ")
    arg = arg.strip()
    if command in ("q", "quit"):
        return False
    if command == "s" and arg:
        await app.search_for(arg)
    elif command == "n":
        await app.next_page()
    elif command == "p":
        await app.previous_page()
    elif command == "f":
        await app.show_favorites()
    elif command in ("o", "a") and arg.isdigit():
        zone = InteractionZone.FAVORITE_ACTION if command == "a" else InteractionZone.OPEN_DETAIL
        await app.interact(int(arg) - 1, zone)
    elif command == "x":
        app.dismiss_modal()
    elif command == "c":
        app.click_modal(ModalTarget.SURFACE)
    else:
        console.print(HELP_TEXT, style="dim")
    return True


async def _browse(server_url: str, api_key: str) -> None:
    from moviefaves.client.app import ClientApp
    from moviefaves.client.console import ConsoleView
    from moviefaves.core.catalog_client import CatalogClient
    from moviefaves.core.favorites_client import FavoritesClient

    async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT_SEC) as http:
        app = ClientApp(
            CatalogClient(http, api_key=api_key),
            FavoritesClient(http, base_url=server_url),
            ConsoleView(console),
        )
        console.print(HELP_TEXT, style="dim")
        while True:
            # Read input off-loop so confirmation timers keep firing
            line = await asyncio.to_thread(console.input, "[bold]> [/bold]")
            if not await run_command(app, line):
                break


@cli.command()
@click.option("--server", "server_url", default=config.SERVER_URL, show_default=True,
              help="Favorites server base URL.")
@click.option("--api-key", default=config.OMDB_API_KEY, help="Catalog API key (default: $OMDB_API_KEY).")
def browse(server_url: str, api_key: str):
    """Interactive terminal client for searching and saving favorites."""
    if not api_key:
        console.print("[red]No catalog API key. Set OMDB_API_KEY or pass --api-key.[/red]")
        raise SystemExit(1)
    try:
        asyncio.run(_browse(server_url, api_key))
    except (EOFError, KeyboardInterrupt):
        console.print()


if __name__ == "__main__":
    cli()
