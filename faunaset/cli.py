#!/usr/bin/env python3

import click

from faunaset.config import configure_logging, load_config
from faunaset.commands.page import page_handler, events_handler
from faunaset.commands.query import query_handler
from faunaset.commands.members import add_handler, remove_handler
from faunaset.commands.config import config_cmd


@click.group()
@click.version_option(package_name='faunaset')
@click.option('-v', '--verbose', is_flag=True, help='Log requests at DEBUG level')
def cli(verbose):
    """faunaset - Query and page resource sets in a remote set database.

    Compose union, intersection, difference, merge, join, match and each
    over set refs, then list current members or their event history.
    """
    configure_logging(load_config(), verbose=verbose)


cli.add_command(page_handler, name='page')
cli.add_command(events_handler, name='events')
cli.add_command(query_handler, name='query')
cli.add_command(add_handler, name='add')
cli.add_command(remove_handler, name='remove')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
