"""
Query serializer for faunaset.

Turns a composed set expression into the query string understood by the
remote service.

Grammar:
    expr        := fn '(' operand (',' operand)* ')' | fn '()'
    fn          := 'union' | 'intersection' | 'difference' | 'merge'
                 | 'join' | 'match' | 'each'
    operand     := expr | ref-string | literal-text
    events-wrap := 'events(' expr ')'
    each-events := 'each(' 'events(' first-operand ')' ',' rest-operands ')'

Operands resolve in priority order:
    1. a nested Expression serializes to its own expr()
    2. anything exposing a string ``ref`` serializes to that ref
    3. str/bool/int/float literals serialize to their text

Literal text is NOT escaped. An operand containing '(', ')' or ','
produces a query the service will parse differently; callers must
supply already-safe literal text.
"""

import threading
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

__all__ = [
    'UNION',
    'INTERSECTION',
    'DIFFERENCE',
    'MERGE',
    'JOIN',
    'MATCH',
    'EACH',
    'FUNCTIONS',
    'MalformedOperandError',
    'Referable',
    'Expression',
    'resolve_operand',
    'events_expression',
]


UNION = 'union'
INTERSECTION = 'intersection'
DIFFERENCE = 'difference'
MERGE = 'merge'
JOIN = 'join'
MATCH = 'match'
EACH = 'each'

FUNCTIONS = (UNION, INTERSECTION, DIFFERENCE, MERGE, JOIN, MATCH, EACH)


class MalformedOperandError(ValueError):
    """Operand that cannot be written into a query string."""
    pass


@runtime_checkable
class Referable(Protocol):
    """Anything that identifies a set or resource by a ref string."""
    ref: str


class Expression:
    """
    A composed, not-yet-executed query: a function name plus operands.

    Expressions are immutable. The operand strings and the full query
    string are computed on first access and cached; concurrent first
    access is serialized so the tree is walked once.

    Example:
        inner = Expression('intersection', 'users/1', 'users/2')
        Expression('union', 'users/3', inner).expr()
        # 'union(users/3,intersection(users/1,users/2))'
    """

    def __init__(self, function: str, *params: Any):
        self._function = function
        self._params: Tuple[Any, ...] = tuple(params)
        self._param_strings: Optional[List[str]] = None
        self._expr: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def function(self) -> str:
        return self._function

    @property
    def params(self) -> Tuple[Any, ...]:
        return self._params

    def param_strings(self) -> List[str]:
        """Resolved operand strings, in operand order."""
        if self._param_strings is None:
            with self._lock:
                if self._param_strings is None:
                    self._param_strings = [resolve_operand(p) for p in self._params]
        return list(self._param_strings)

    def expr(self) -> str:
        """Canonical query string, e.g. ``union(a,b)``."""
        if self._expr is None:
            strings = self.param_strings()
            with self._lock:
                if self._expr is None:
                    self._expr = f"{self._function}({','.join(strings)})"
        return self._expr

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._function!r}, params={len(self._params)})"


def resolve_operand(param: Any) -> str:
    """
    Resolve a single operand to its query-string form.

    Args:
        param: Expression, ref-bearing value, or literal

    Returns:
        Serialized operand text

    Raises:
        MalformedOperandError: If param is none of the accepted kinds
    """
    if isinstance(param, Expression):
        return param.expr()

    if isinstance(param, Referable):
        ref = param.ref
        if isinstance(ref, str):
            return ref
        raise MalformedOperandError(
            f"Operand {type(param).__name__} has a non-string ref: {ref!r}"
        )

    # bool before int: bool is an int subclass
    if isinstance(param, bool):
        return 'true' if param else 'false'
    if isinstance(param, (str, int, float)):
        return str(param)

    raise MalformedOperandError(
        f"Cannot serialize operand of type {type(param).__name__}: {param!r}"
    )


def events_expression(node: Expression) -> str:
    """
    Query string for the event history of an expression.

    Generic expressions are wrapped once: ``events(union(a,b))``.

    ``each`` is the exception. It maps a function over set members, and
    only the mapped-over membership stream has an event history, so the
    first operand is wrapped and the rest are appended unchanged:
    ``each(events(inner),rest...)``.
    """
    if node.function == EACH:
        strings = node.param_strings()
        if not strings:
            raise MalformedOperandError("each() has no set to read events from")
        first, rest = strings[0], strings[1:]
        return f"each(events({first}),{','.join(rest)})"

    return f"events({node.expr()})"
