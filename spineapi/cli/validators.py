import click

from spineapi.constants import Language
from spineapi.errors import UnknownLanguageCodeError
from spineapi.language import parse_language


def validate_language(ctx: click.Context, param, value) -> Language | None:
    """
    Convert a ``--language`` value into a ``Language`` member.

    Accepts either a wire code (for example "Deutsch") or a member name
    (for example "german").

    Returns:
        The parsed language, or None if the option was not given.
    """
    if value is None:
        return None
    try:
        return parse_language(value)
    except UnknownLanguageCodeError:
        choices = ", ".join(language.name.lower() for language in Language)
        raise click.BadParameter(f"Unknown language {value!r}; expected one of: {choices}")


def validate_project_id(ctx: click.Context, param, value: str) -> int | str:
    """
    Validate a project ID argument.

    Numeric IDs are converted to integers so they are sent as JSON numbers;
    anything else is passed through as a string.
    """
    value = value.strip()
    if not value:
        raise click.BadParameter("Project id must not be empty")
    return int(value) if value.isdigit() else value
