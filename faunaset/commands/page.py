"""
Page and events commands for faunaset.

Fetch one page of a plain named set, or of its event history.
"""

import click
from typing import Optional

from ..api import get_default_client
from ..cli_utils import add_common_options, handle_errors, output_jsonl, pagination_from_options
from ..domain import EventsPage, Set, SetPage
from ..render import render_events_page, render_set_page


def show_page(page: SetPage, output_json: bool, title: Optional[str] = None) -> None:
    if output_json:
        output_jsonl({'resource': ref} for ref in page)
    else:
        render_set_page(page, title=title)


def show_events(page: EventsPage, output_json: bool, title: Optional[str] = None) -> None:
    if output_json:
        output_jsonl(event.to_dict() for event in page)
    else:
        render_events_page(page, title=title)


@click.command('page')
@click.argument('ref')
@add_common_options('size', 'before', 'after', 'json')
@handle_errors
def page_handler(ref: str, size: Optional[int], before: Optional[str],
                 after: Optional[str], output_json: bool):
    """
    List the members of a set.

    \b
    Examples:
        faunaset page users/123/sets/followers
        faunaset page users/123/sets/followers --size 50 --json
    """
    pagination = pagination_from_options(size, before, after)
    page = Set(ref).page(pagination, client=get_default_client())
    show_page(page, output_json, title=ref)


@click.command('events')
@click.argument('ref')
@add_common_options('size', 'before', 'after', 'json')
@handle_errors
def events_handler(ref: str, size: Optional[int], before: Optional[str],
                   after: Optional[str], output_json: bool):
    """
    List membership events of a set.

    \b
    Examples:
        faunaset events users/123/sets/followers
        faunaset events users/123/sets/followers --json | jq '.action'
    """
    pagination = pagination_from_options(size, before, after)
    page = Set(ref).events(pagination, client=get_default_client())
    show_events(page, output_json, title=f"{ref}/events")
