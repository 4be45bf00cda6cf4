from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer

from coc_client import AuthError, ClashClient, ConfigurationError, ENV_API_TOKEN, RankingKind, TransportError

from . import console
from .http import ENV_API_URI, CliSettings, make_client
from .logging_ import setup_logging

app = typer.Typer(name="coc", help="Clash of Clans API CLI", no_args_is_help=True)


@app.callback()
def _main(
        ctx: typer.Context,
        token: str | None = typer.Option(None, "--token", envvar=ENV_API_TOKEN, help="API token."),
        base_url: str | None = typer.Option(None, "--base-url", envvar=ENV_API_URI, help="Override base URL."),
        timeout: float = typer.Option(15.0, "--timeout", help="Request timeout in seconds."),
        verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="Verbose logs (-vv for HTTP wire logs)."),
):
    setup_logging(verbose)
    ctx.obj = CliSettings(token=token, base_url=base_url, timeout_s=timeout)


def _run(ctx: typer.Context, call: Callable[[ClashClient], Awaitable[Any]]) -> None:
    settings: CliSettings = ctx.obj or CliSettings()
    try:
        client = make_client(settings)
    except ConfigurationError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    async def _go() -> Any:
        try:
            return await call(client)
        finally:
            await client.aclose()

    try:
        data = asyncio.run(_go())
    except AuthError as e:
        console.err(f"Unauthorized ({e.status_code}): {e}. Check the token and its allowed IP addresses.")
        raise typer.Exit(code=2)
    except TransportError as e:
        console.request_failed(e)
        raise typer.Exit(code=1)

    console.print_json(data)


@app.command("clan")
def clan(ctx: typer.Context, tag: str = typer.Argument(..., help="Clan tag, e.g. #UPC2UQ.")):
    """Show a single clan."""
    _run(ctx, lambda c: c.clan_by_tag(tag))


@app.command("members")
def members(ctx: typer.Context, tag: str = typer.Argument(..., help="Clan tag.")):
    """List clan members."""
    _run(ctx, lambda c: c.clan_members_by_tag(tag))


@app.command("warlog")
def warlog(ctx: typer.Context, tag: str = typer.Argument(..., help="Clan tag.")):
    """Show the clan war log."""
    _run(ctx, lambda c: c.clan_warlog_by_tag(tag))


@app.command("war")
def current_war(ctx: typer.Context, tag: str = typer.Argument(..., help="Clan tag.")):
    """Show the clan's current war."""
    _run(ctx, lambda c: c.clan_current_war_by_tag(tag))


@app.command("league-group")
def league_group(ctx: typer.Context, tag: str = typer.Argument(..., help="Clan tag.")):
    """Show the clan's current war league group."""
    _run(ctx, lambda c: c.clan_league(tag))


@app.command("league-war")
def league_war(ctx: typer.Context, war_tag: str = typer.Argument(..., help="War tag from a league group round.")):
    """Show a single clan war league war."""
    _run(ctx, lambda c: c.clan_league_wars(war_tag))


@app.command("player")
def player(ctx: typer.Context, tag: str = typer.Argument(..., help="Player tag.")):
    """Show a single player."""
    _run(ctx, lambda c: c.player_by_tag(tag))


@app.command("leagues")
def leagues(ctx: typer.Context):
    """List leagues."""
    _run(ctx, lambda c: c.leagues())


@app.command("search")
def search(
        ctx: typer.Context,
        name: str | None = typer.Option(None, "--name", help="Clan name (at least 3 characters)."),
        war_frequency: str | None = typer.Option(None, "--war-frequency", help="e.g. always, never, unknown."),
        location_id: int | None = typer.Option(None, "--location-id", help="Location ID."),
        min_members: int | None = typer.Option(None, "--min-members"),
        max_members: int | None = typer.Option(None, "--max-members"),
        min_clan_points: int | None = typer.Option(None, "--min-clan-points"),
        min_clan_level: int | None = typer.Option(None, "--min-clan-level"),
        limit: int | None = typer.Option(None, "--limit", help="Max number of results."),
        after: str | None = typer.Option(None, "--after", help="Paging cursor from a previous response."),
        before: str | None = typer.Option(None, "--before", help="Paging cursor from a previous response."),
):
    """Search clans by name and/or filters."""
    filters = (name, war_frequency, location_id, min_members, max_members, min_clan_points, min_clan_level,
               limit, after, before)
    if all(value is None for value in filters):
        console.warn("No filters given; the API rejects clan searches without at least one filter.")

    def _search(c: ClashClient):
        query = c.clans()
        setters = (
            (query.with_name, name),
            (query.with_war_frequency, war_frequency),
            (query.with_location_id, location_id),
            (query.with_min_members, min_members),
            (query.with_max_members, max_members),
            (query.with_min_clan_points, min_clan_points),
            (query.with_min_clan_level, min_clan_level),
            (query.with_limit, limit),
            (query.with_after, after),
            (query.with_before, before),
        )
        for setter, value in setters:
            if value is not None:
                setter(value)
        return query.fetch()

    _run(ctx, _search)


@app.command("locations")
def locations(
        ctx: typer.Context,
        location_id: str | None = typer.Option(None, "--id", help="Location ID."),
        rankings: RankingKind | None = typer.Option(None, "--rankings", help="Show clan or player rankings."),
):
    """List locations, show one location, or its rankings."""
    if rankings is not None and location_id is None:
        console.err("--rankings requires --id.")
        raise typer.Exit(code=2)

    def _locations(c: ClashClient):
        query = c.locations()
        if location_id is None:
            return query.fetch()
        location = query.with_id(location_id)
        if rankings is RankingKind.CLANS:
            return location.by_clan().fetch()
        if rankings is RankingKind.PLAYERS:
            return location.by_player().fetch()
        return location.fetch()

    _run(ctx, _locations)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
