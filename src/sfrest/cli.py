from __future__ import annotations

import itertools
import json
import logging
from typing import Any, Optional, Tuple

import click

from . import __version__
from .auth import SFConfig, login
from .crud import get_object
from .env_loader import load_env_files
from .exceptions import MissingCredentialsError, SfRestError
from .logging_config import configure_logging
from .query import select
from .schema import list_objects, object_schema
from .session import SessionToken

_logger = logging.getLogger(__name__)

_CREDENTIALS_HELP = (
    "Set these environment variables (or create a .env file), e.g. for "
    "client-credentials auth:\n"
    "  SF_AUTH_FLOW=client_credentials\n"
    "  SF_CLIENT_ID=...             # Connected App Consumer Key\n"
    "  SF_CLIENT_SECRET=...         # Connected App Client Secret\n"
    "  SF_LOGIN_URL=https://login.salesforce.com  # or your custom domain URL\n"
    "  SF_API_VERSION=v60.0         # optional; will auto-discover if omitted\n\n"
    "For SF_AUTH_FLOW=password also set SF_USERNAME, SF_PASSWORD and SF_SECURITY_TOKEN."
)


def _connect() -> SessionToken:
    try:
        return login(SFConfig.from_env())
    except MissingCredentialsError as e:
        needed = ", ".join(e.missing)
        raise click.ClickException(
            f"Missing Salesforce credentials: {needed}\n\n{_CREDENTIALS_HELP}"
        ) from e
    except SfRestError as e:
        raise click.ClickException(str(e)) from e


def _echo_json(data: Any, pretty: bool) -> None:
    click.echo(json.dumps(data, indent=2 if pretty else None, default=str))


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(__version__, "--version", prog_name="sfrest")
@click.option(
    "-v",
    "--verbose",
    "loglevel",
    flag_value=logging.INFO,
    default=None,
    help="Enable INFO logs.",
)
@click.option(
    "-vv",
    "--very-verbose",
    "loglevel",
    flag_value=logging.DEBUG,
    help="Enable DEBUG logs.",
)
@click.pass_context
def cli(ctx: click.Context, loglevel: Optional[int]) -> None:
    """Salesforce REST CLI. Use subcommands like 'login', 'query' or 'schema'."""
    configure_logging(loglevel)
    load_env_files()
    _logger.debug("CLI start, version=%s", __version__)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("login")
def cmd_login() -> None:
    """Authenticate and show the instance and API version."""
    token = _connect()
    click.echo("Connected to Salesforce.")
    click.echo(f"Instance URL: {token.instance_url}")
    click.echo(f"API Version:  {token.api_version}")
    click.echo(f"Token preview: {token.access_token[:10]}...")


@cli.command("objects")
@click.option("--all", "show_all", is_flag=True, help="Show all sObjects (default: only queryable).")
@click.argument("names", nargs=-1)
def cmd_objects(show_all: bool, names: Tuple[str, ...]) -> None:
    """List sObjects, optionally only NAMES."""
    token = _connect()
    sobjects = list_objects(token, *names)
    for name in sorted(s["name"] for s in sobjects if show_all or s.get("queryable")):
        click.echo(name)


@cli.command("schema")
@click.argument("obj")
@click.option("--raw", is_flag=True, help="Show Salesforce field names instead of canonical ones.")
@click.option("--no-system", is_flag=True, help="Hide system fields (Id, CreatedDate, ...).")
@click.option("--prop", default="type", show_default=True, help="Describe property to show.")
def cmd_schema(obj: str, raw: bool, no_system: bool, prop: str) -> None:
    """Show the fields of OBJ and one describe property of each."""
    token = _connect()
    schema = object_schema(token, obj, prop=prop, raw=raw, include_system=not no_system)
    width = max((len(k) for k in schema), default=0)
    for name, value in schema.items():
        click.echo(f"{name.ljust(width)}  {value}")


@cli.command("query")
@click.argument("soql")
@click.option("--limit", type=int, default=None, help="Stop after N records (fetches no further pages).")
@click.option("--raw", is_flag=True, help="Keep Salesforce field names.")
@click.option("--pretty", is_flag=True, help="Pretty-print JSON.")
def cmd_query(soql: str, limit: Optional[int], raw: bool, pretty: bool) -> None:
    """Run a SOQL query and print one JSON record per line."""
    token = _connect()
    cursor = select(token, soql, translate=not raw)
    for record in itertools.islice(cursor, limit):
        _echo_json(record, pretty)
    _logger.info("Fetched %d page(s), total size %s", cursor.requests_made, cursor.total_size)


@cli.command("get")
@click.argument("obj")
@click.argument("record_id")
@click.argument("fields", nargs=-1)
@click.option("--pretty", is_flag=True, help="Pretty-print JSON.")
def cmd_get(obj: str, record_id: str, fields: Tuple[str, ...], pretty: bool) -> None:
    """Fetch one OBJ record by RECORD_ID."""
    token = _connect()
    _echo_json(get_object(token, obj, record_id, *fields), pretty)
