"""
Membership commands for faunaset.

Add a resource to, or remove it from, a custom set.
"""

import click

from ..api import get_default_client
from ..cli_utils import handle_errors
from ..domain import CustomSet


@click.command('add')
@click.argument('set_ref')
@click.argument('resource')
@handle_errors
def add_handler(set_ref: str, resource: str):
    """
    Add RESOURCE to the set SET_REF.

    \b
    Example:
        faunaset add users/123/sets/favorites posts/99
    """
    CustomSet(set_ref).add(resource, client=get_default_client())
    click.echo(f"Added {resource} to {set_ref}", err=True)


@click.command('remove')
@click.argument('set_ref')
@click.argument('resource')
@handle_errors
def remove_handler(set_ref: str, resource: str):
    """
    Remove RESOURCE from the set SET_REF.

    \b
    Example:
        faunaset remove users/123/sets/favorites posts/99
    """
    CustomSet(set_ref).remove(resource, client=get_default_client())
    click.echo(f"Removed {resource} from {set_ref}", err=True)
