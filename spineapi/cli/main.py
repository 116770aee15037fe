import json
import logging
from functools import wraps
from typing import Any, Callable

import click
import requests

from spineapi import __version__ as about
from spineapi.cli import exit_codes
from spineapi.cli.config import setup_logging
from spineapi.cli.validators import validate_language, validate_project_id
from spineapi.client.init import SpineApi
from spineapi.config import load_config_from_env, resolve_config
from spineapi.constants import DEFAULT_TIMEOUT, LANGUAGE_TABLE
from spineapi.domain.models import Project
from spineapi.errors import ImageDecodeError, LanguageEncodingError, UnknownLanguageCodeError

# Get a logger for this module.
log = logging.getLogger(__name__)

EPILOG = f"""
Examples:

{click.style('• list all projects with English texts', fg="green")}

    $ spineapi --language english projects

{click.style('• show the info page of project 42 for a logged in user', fg="green")}

    $ spineapi -u alice -p secret project-info 42

{click.style('• download and decode a preview image', fg="green")}

    $ spineapi image https://clockwork-origins.com/spine/preview.png -o preview.png

Connection settings are also read from SPINE_SERVER_URL, SPINE_USERNAME,
SPINE_PASSWORD and SPINE_LANGUAGE (a .env file is honored).
"""


def _echo_json(payload: Any) -> None:
    """Print ``payload`` as indented JSON on stdout."""
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _project_as_json(project: Project) -> dict[str, Any]:
    """Render an enriched project for JSON output."""
    return {
        "project": dict(project.data),
        "packages": [dict(package) for package in project.packages],
        "alreadyPlayed": project.already_played,
    }


def handle_errors(command: Callable[..., None]) -> Callable[..., None]:
    """Map library and transport failures of a command onto exit codes."""

    @wraps(command)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        ctx = click.get_current_context()
        try:
            command(*args, **kwargs)
        except (LanguageEncodingError, ImageDecodeError) as exc:
            log.error("%s", exc)
            ctx.exit(exit_codes.DECODE_ERROR)
        except requests.RequestException as exc:
            log.error("Request failed: %s", exc)
            ctx.exit(exit_codes.TRANSPORT_FAILURE)
        except (click.exceptions.Exit, click.ClickException):
            raise
        except Exception:
            log.exception("Unexpected failure")
            ctx.exit(exit_codes.UNEXPECTED_ERROR)

    return wrapper


@click.group(
    help=about.__description__,
    epilog=EPILOG,
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message="%(prog)s, version %(version)s\nCheck {url} for more info".format(url=about.__url__),
)
@click.option(
    "--server-url", "-s",
    metavar="<url>",
    help="Base address of the Spine service",
)
@click.option(
    "--username", "-u",
    metavar="<name>",
    help="Account name sent with catalog requests",
)
@click.option(
    "--password", "-p",
    metavar="<password>",
    help="Account password sent with catalog requests",
)
@click.option(
    "--language", "-l",
    metavar="<language>",
    callback=validate_language,
    help="Language name or wire code, e.g. german or Deutsch",
)
@click.option(
    "--timeout", "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT[1],
    show_default=True,
    help="Read timeout in seconds",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Only log warnings and errors",
)
@click.pass_context
def main(
        ctx: click.Context,
        server_url: str | None,
        username: str | None,
        password: str | None,
        language,
        timeout: float,
        verbose: bool,
        quiet: bool,
):
    """
    Entry point of the spineapi command group.

    Resolves the connection settings (environment first, then options) and
    stores a ``SpineApi`` client on the click context for the subcommands.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level=level, stream=click.get_text_stream("stderr"))

    if not quiet:
        click.echo(click.style(about.__intro__, fg="blue"), err=True)

    try:
        base = load_config_from_env()
    except UnknownLanguageCodeError as exc:
        raise click.UsageError(f"SPINE_LANGUAGE: {exc}")

    override: dict[str, Any] = {}
    credentials = {
        key: value
        for key, value in (("username", username), ("password", password))
        if value is not None
    }
    if server_url:
        override["server_url"] = server_url
    if credentials:
        override["credentials"] = credentials
    if language is not None:
        override["language"] = language

    config = resolve_config(base, override)
    log.debug("Using server %s with language %s", config.server_url, config.language.name)
    ctx.obj = SpineApi(config, timeout=(DEFAULT_TIMEOUT[0], timeout))


@main.command()
@click.option("--raw", is_flag=True, default=False, help="Print the unmodified response body")
@click.pass_obj
@handle_errors
def projects(client: SpineApi, raw: bool):
    """List all projects with their packages."""
    if raw:
        _echo_json(client.request_all_projects())
        return
    found = client.get_projects()
    log.info("Fetched %d project(s)", len(found))
    _echo_json([_project_as_json(project) for project in found])


@main.command("project-info")
@click.argument("project_id", callback=validate_project_id)
@click.pass_obj
@handle_errors
def project_info(client: SpineApi, project_id: int | str):
    """Show the info page of one project."""
    _echo_json(dict(client.get_project_info(project_id).data))


@main.command()
@click.pass_obj
@handle_errors
def news(client: SpineApi):
    """List the news feed."""
    _echo_json(client.request_all_news())


@main.command()
@click.argument("project_id", callback=validate_project_id)
@click.pass_obj
@handle_errors
def ratings(client: SpineApi, project_id: int | str):
    """Show the ratings of one project."""
    _echo_json(client.get_ratings(project_id))


@main.command()
@click.argument("project_id", callback=validate_project_id)
@click.pass_obj
@handle_errors
def reviews(client: SpineApi, project_id: int | str):
    """Show the reviews of one project."""
    _echo_json(client.get_reviews(project_id))


@main.command()
@click.argument("url")
@click.option(
    "--out", "-o",
    "output",
    type=click.File("wb"),
    default="-",
    metavar="<file>",
    show_default=True,
    help="Where to write the decoded image",
)
@click.pass_obj
@handle_errors
def image(client: SpineApi, url: str, output):
    """Download a preview image and write the decoded bytes."""
    data = client.load_image(url)
    output.write(data)
    log.info("Wrote %d byte(s)", len(data))


@main.command()
def languages():
    """List supported languages with their wire codes and bit flags."""
    for language, encoding in LANGUAGE_TABLE.items():
        click.echo(
            f"{language.name.lower():<10} {encoding.wire_code:<10} "
            f"{encoding.bit_flag:>3}  {encoding.display_name}"
        )


if __name__ == "__main__":
    main(prog_name=about.__title__)
