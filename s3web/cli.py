#!/usr/bin/env python3

import click

from s3web.config import configure_logging, load_config
from s3web.commands.location import location_handler, identifier_handler
from s3web.commands.commits import list_handler, get_handler
from s3web.commands.config import config_cmd


@click.group()
@click.version_option(package_name='s3web')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """s3web - Read commits from a static HTTP-hosted remote.

    Remotes are written as s3web://host[:port][/path] and read from
    http://host[:port][/path]/titan.
    """
    logging_config = load_config().get('logging')
    if not isinstance(logging_config, dict):
        logging_config = {}
    level = 'DEBUG' if debug else logging_config.get('level', 'WARNING')
    configure_logging(level, logging_config.get('format', '%(levelname)s: %(message)s'))


cli.add_command(location_handler, name='location')
cli.add_command(identifier_handler, name='identifier')
cli.add_command(list_handler, name='list')
cli.add_command(get_handler, name='get')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
