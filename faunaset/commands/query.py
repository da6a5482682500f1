"""
Query command for faunaset.

Runs a single set function over ref or literal operands:

    faunaset query union users/1/sets/a users/2/sets/a
    faunaset query match users.name alice --events
    faunaset query each users/1/sets/follows users/self/sets/posts --show-expr
"""

import click
from typing import Optional

from ..api import get_default_client
from ..cli_utils import add_common_options, handle_errors, pagination_from_options
from ..domain import EachSet, QuerySet
from ..serializer import EACH, FUNCTIONS, events_expression
from .page import show_events, show_page


def build_query(function: str, operands) -> QuerySet:
    """QuerySet for a function name and string operands."""
    if function == EACH:
        return EachSet(*operands)
    return QuerySet(function, *operands)


@click.command('query')
@click.argument('function', type=click.Choice(list(FUNCTIONS)))
@click.argument('operands', nargs=-1)
@click.option('--events', 'show_history', is_flag=True,
              help='Return the event history instead of current members')
@click.option('--show-expr', is_flag=True,
              help='Print the query string and exit without contacting the service')
@add_common_options('size', 'before', 'after', 'json')
@handle_errors
def query_handler(function: str, operands: tuple, show_history: bool, show_expr: bool,
                  size: Optional[int], before: Optional[str], after: Optional[str],
                  output_json: bool):
    """
    Evaluate FUNCTION over OPERANDS.

    Operands are set refs or literal terms, passed through unescaped.
    """
    query = build_query(function, operands)

    if show_expr:
        click.echo(events_expression(query) if show_history else query.expr())
        return

    pagination = pagination_from_options(size, before, after)
    client = get_default_client()
    if show_history:
        show_events(query.events(pagination, client=client), output_json,
                    title=events_expression(query))
    else:
        show_page(query.page(pagination, client=client), output_json, title=query.expr())
