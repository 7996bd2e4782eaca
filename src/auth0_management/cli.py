"""Command line access to the Management API.

Reads AUTH0_DOMAIN and AUTH0_TOKEN (or a .env file) and prints JSON.
"""

import asyncio
import json
import logging
from functools import wraps

import click
from pydantic import ValidationError as PydanticValidationError

from auth0_management.client import ManagementApiClient
from auth0_management.config import ManagementApiSettings
from auth0_management.exceptions import ManagementApiError
from auth0_management.models import GetConnectionsRequest, GetRolesRequest
from auth0_management.paging import PagedList, PaginationInfo


def run_async(coro):
    """Run a coroutine to completion from a Click command."""
    return asyncio.run(coro)


def handle_api_exceptions(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PydanticValidationError as e:
            click.echo(f"[{click.style('invalid', fg='red')}] {e}", err=True)
        except ManagementApiError as e:
            status = e.status_code if e.status_code is not None else "error"
            click.echo(f"[{click.style(str(status), fg='red')}] {e.message}", err=True)
        raise click.exceptions.Exit(1)

    return wrapper


def _echo_models(models) -> None:
    payload = [m.model_dump(mode="json", exclude_none=True) for m in models]
    if isinstance(models, PagedList) and models.paging is not None:
        payload = {
            "items": payload,
            **models.paging.model_dump(exclude_none=True),
        }
    click.echo(json.dumps(payload, indent=4))


def _pagination(page, per_page, include_totals):
    if page is None and per_page is None and not include_totals:
        return None
    return PaginationInfo(
        page_no=page or 0,
        per_page=per_page or 50,
        include_totals=include_totals,
    )


def _build_client() -> ManagementApiClient:
    try:
        settings = ManagementApiSettings()
    except PydanticValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    return ManagementApiClient.from_settings(settings)


async def _call(action):
    async with _build_client() as client:
        return await action(client)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log requests at DEBUG level")
def cli(verbose):
    """Auth0 Management API client."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def connections():
    """Manage connections."""


@connections.command("list")
@click.option("--strategy", "-s", multiple=True, help="Strategy filter, repeatable")
@click.option("--name", "-n", default=None)
@click.option("--fields", "-f", default=None, help="Comma separated field names")
@click.option("--exclude-fields", is_flag=True, help="Exclude --fields instead of including them")
@click.option("--page", type=click.IntRange(min=0), default=None)
@click.option("--per-page", type=click.IntRange(min=1), default=None)
@click.option("--include-totals", is_flag=True)
@handle_api_exceptions
def list_connections(strategy, name, fields, exclude_fields, page, per_page, include_totals):
    request = GetConnectionsRequest(
        strategy=list(strategy) or None,
        name=name,
        fields=fields,
        include_fields=False if exclude_fields else None,
    )
    pagination = _pagination(page, per_page, include_totals)
    result = run_async(
        _call(lambda c: c.connections.get_all(request, pagination))
    )
    _echo_models(result)


@connections.command("get")
@click.argument("id")
@click.option("--fields", "-f", default=None, help="Comma separated field names")
@handle_api_exceptions
def get_connection(id, fields):
    connection = run_async(
        _call(lambda c: c.connections.get(id, fields=fields))
    )
    click.echo(connection.model_dump_json(indent=4, exclude_none=True))


@connections.command("delete")
@click.argument("id")
@click.confirmation_option(prompt="Delete the connection and all its users?")
@handle_api_exceptions
def delete_connection(id):
    run_async(_call(lambda c: c.connections.delete(id)))
    click.echo(f"Deleted connection {id}")


@connections.command("delete-user")
@click.argument("id")
@click.argument("email")
@handle_api_exceptions
def delete_connection_user(id, email):
    run_async(_call(lambda c: c.connections.delete_user(id, email)))
    click.echo(f"Deleted {email} from connection {id}")


@cli.group()
def roles():
    """Manage roles."""


@roles.command("list")
@click.option("--name-filter", default=None)
@click.option("--page", type=click.IntRange(min=0), default=None)
@click.option("--per-page", type=click.IntRange(min=1), default=None)
@click.option("--include-totals", is_flag=True)
@handle_api_exceptions
def list_roles(name_filter, page, per_page, include_totals):
    request = GetRolesRequest(name_filter=name_filter)
    pagination = _pagination(page, per_page, include_totals)
    result = run_async(
        _call(lambda c: c.roles.get_all(request, pagination))
    )
    _echo_models(result)


@roles.command("get")
@click.argument("id")
@handle_api_exceptions
def get_role(id):
    role = run_async(_call(lambda c: c.roles.get(id)))
    click.echo(role.model_dump_json(indent=4, exclude_none=True))


if __name__ == "__main__":
    cli()
