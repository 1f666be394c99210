"""
Identifier translation commands for s3web.
"""

import json

import click

from ..domain import Location
from ..cli_utils import handle_errors
from ..registry import create_registry


def _parse_option(ctx, param, values):
    options = {}
    for item in values:
        if '=' not in item:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        key, value = item.split('=', 1)
        options[key] = value
    return options


@click.command('location')
@click.argument('identifier')
@click.option('-o', '--option', 'options', multiple=True, callback=_parse_option,
              help='Extra remote option as key=value (s3web accepts none)')
@handle_errors
def location_handler(identifier, options):
    """Translate an s3web:// IDENTIFIER into its HTTP location.

    \b
    Examples:
        s3web location s3web://bucket.example.com/data
    """
    remote = create_registry().get('s3web')
    properties = remote.from_url(identifier, options)
    print(json.dumps(properties, ensure_ascii=False))


@click.command('identifier')
@click.argument('url')
@handle_errors
def identifier_handler(url):
    """Translate an http:// URL back into an s3web:// identifier.

    \b
    Examples:
        s3web identifier http://bucket.example.com/data
    """
    remote = create_registry().get('s3web')
    properties = {'location': Location.from_url(url).url}
    remote.validate_remote(properties)
    identifier, options = remote.to_url(properties)
    print(json.dumps({'identifier': identifier, 'options': options}, ensure_ascii=False))
