"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import sys
import click
from functools import wraps
from typing import Any, Dict, Optional
from .exit_codes import (
    INTERRUPTED,
    get_exit_code_for_exception, CommandError
)


def handle_errors(func):
    """
    Decorator that provides standard CLI error behavior:
    - One-line error message on stderr
    - Exit code chosen from the exception type
    - Click exceptions pass through untouched
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except CommandError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(e.exit_code)
        except Exception as e:
            click.echo(f"Error ({type(e).__name__}): {e}", err=True)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def pagination_from_options(
    size: Optional[int],
    before: Optional[str],
    after: Optional[str],
) -> Dict[str, Any]:
    """Collect the pagination flags that were actually given."""
    pagination: Dict[str, Any] = {}
    if size is not None:
        pagination['size'] = size
    if before is not None:
        pagination['before'] = before
    if after is not None:
        pagination['after'] = after
    return pagination


def output_jsonl(items):
    """Print one JSON object per line."""
    for item in items:
        print(json.dumps(item, ensure_ascii=False), flush=True)


# Standard options that many commands share
common_options = {
    'size': click.option('--size', '-n', type=int,
                         help='Maximum items per page'),
    'before': click.option('--before',
                           help='Cursor: return items before this position'),
    'after': click.option('--after',
                          help='Cursor: return items after this position'),
    'json': click.option('--json', 'output_json', is_flag=True,
                         help='Output as JSONL (default: pretty table)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('size', 'json')
        def my_command(size, output_json):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
