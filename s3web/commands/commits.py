"""
Commit listing commands for s3web.

Output is JSONL by default, one commit per line, in the same shape as
the remote's metadata document. Use --pretty for a table.
"""

import json

import click
from rich.console import Console
from rich.table import Table

from ..cli_utils import handle_errors
from ..config import load_config, resolve_remote
from ..exit_codes import NOT_FOUND, exit_with_code
from ..registry import create_registry

console = Console()


def _remote_properties(remote, name_or_identifier):
    identifier = resolve_remote(name_or_identifier, load_config())
    properties = remote.from_url(identifier, {})
    remote.validate_remote(properties)
    return properties


def _render_table(commits):
    table = Table(title=f"{len(commits)} commit(s)")
    table.add_column("ID", style="cyan")
    table.add_column("Timestamp")
    table.add_column("Tags")

    for commit in commits:
        ts = commit.properties.get('timestamp')
        tags = ", ".join(
            key if value in (None, "") else f"{key}={value}"
            for key, value in commit.tags.items()
        )
        table.add_row(commit.id, str(ts) if ts is not None else "-", tags)

    console.print(table)


@click.command('list')
@click.argument('remote_name')
@click.option('-t', '--tag', 'tags', multiple=True,
              help='Only commits with this tag (key or key=value); repeatable')
@click.option('--pretty', is_flag=True, help='Display as a table instead of JSONL')
@handle_errors
def list_handler(remote_name, tags, pretty):
    """List commits of REMOTE_NAME, newest first.

    REMOTE_NAME is a remote from the config file or an s3web:// identifier.

    \b
    Examples:
        s3web list s3web://bucket.example.com/data
        s3web list origin --tag env=prod --pretty
    """
    remote = create_registry().get('s3web')
    properties = _remote_properties(remote, remote_name)
    commits = remote.list_commits(properties, {}, list(tags))

    if pretty:
        _render_table(commits)
        return

    for commit in commits:
        print(commit.to_jsonl(), flush=True)


@click.command('get')
@click.argument('remote_name')
@click.argument('commit_id')
@handle_errors
def get_handler(remote_name, commit_id):
    """Show commit COMMIT_ID of REMOTE_NAME as JSON.

    Exits with status 64 if the commit does not exist.
    """
    remote = create_registry().get('s3web')
    properties = _remote_properties(remote, remote_name)
    commit = remote.get_commit(properties, {}, commit_id)

    if commit is None:
        exit_with_code(NOT_FOUND, f"commit '{commit_id}' not found")

    print(json.dumps(commit.to_dict(), ensure_ascii=False))
