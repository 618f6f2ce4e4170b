"""
Listing Filters

Typed predicate builder for property searches. A ListingFilter expands to an
ordered list of Clause objects which compile to a parameterized WHERE
fragment. Clauses are always ANDed together; user values never reach the
SQL text.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from puntohogar.core.exceptions import InvalidFilterError
from puntohogar.core.models import normalize_category, normalize_transaction_type


class Operator(str, Enum):
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    CONTAINS = "contains"


# Columns a clause may reference (whitelist to prevent SQL injection)
FILTERABLE_COLUMNS = {'type', 'category', 'price', 'title', 'location'}

_COMPARISONS = {
    Operator.EQ: '=',
    Operator.GTE: '>=',
    Operator.LTE: '<=',
}

LIKE_ESCAPE = '\\'


@dataclass(frozen=True)
class Clause:
    """One predicate: fields OP value. Several fields only make sense for CONTAINS."""
    fields: Tuple[str, ...]
    operator: Operator
    value: Any


@dataclass
class ListingFilter:
    """Optional search criteria for the listings endpoint"""
    type: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    search: Optional[str] = None

    def clauses(self) -> List[Clause]:
        """Expand into clauses, skipping unset criteria."""
        clauses = []
        if self.type:
            clauses.append(Clause(('type',), Operator.EQ, self.type))
        if self.category:
            clauses.append(Clause(('category',), Operator.EQ, self.category))
        if self.min_price is not None:
            clauses.append(Clause(('price',), Operator.GTE, self.min_price))
        if self.max_price is not None:
            clauses.append(Clause(('price',), Operator.LTE, self.max_price))
        if self.search:
            clauses.append(Clause(('title', 'location'), Operator.CONTAINS, self.search))
        return clauses

    def is_empty(self) -> bool:
        return not self.clauses()


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )


def compile_clauses(clauses: List[Clause]) -> Tuple[str, List[Any]]:
    """
    Compile clauses into a WHERE fragment and its parameters.

    CONTAINS is a case-insensitive substring match over any of the clause's
    fields; it relies on the connection providing a casefold() SQL function.

    Returns:
        ("", []) for no clauses, otherwise ("WHERE ...", params)
    """
    conditions = []
    params: List[Any] = []

    for clause in clauses:
        unknown = [f for f in clause.fields if f not in FILTERABLE_COLUMNS]
        if unknown or not clause.fields:
            raise InvalidFilterError(f"Cannot filter on: {', '.join(unknown) or '(no field)'}")

        if clause.operator == Operator.CONTAINS:
            pattern = f"%{escape_like(str(clause.value).casefold())}%"
            parts = [f"casefold({f}) LIKE ? ESCAPE '{LIKE_ESCAPE}'" for f in clause.fields]
            conditions.append(f"({' OR '.join(parts)})")
            params.extend([pattern] * len(clause.fields))
        else:
            if len(clause.fields) != 1:
                raise InvalidFilterError(f"{clause.operator.value} takes exactly one field")
            conditions.append(f"{clause.fields[0]} {_COMPARISONS[clause.operator]} ?")
            params.append(clause.value)

    if not conditions:
        return '', []
    return 'WHERE ' + ' AND '.join(conditions), params


def _parse_price(args: Mapping[str, Any], name: str) -> Optional[float]:
    raw = args.get(name)
    if raw is None or str(raw).strip() == '':
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise InvalidFilterError(f"{name} must be a number, got {raw!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidFilterError(f"{name} must be a non-negative number, got {raw!r}")
    return value


def _parse_text(args: Mapping[str, Any], name: str) -> Optional[str]:
    raw = args.get(name)
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_listing_filter(args: Mapping[str, Any]) -> ListingFilter:
    """
    Build a ListingFilter from query-string parameters.

    Recognized: type, category, minPrice, maxPrice, search. Absent or blank
    parameters are left out of the filter entirely.

    Raises:
        InvalidFilterError: minPrice/maxPrice is not a finite non-negative number
    """
    return ListingFilter(
        type=normalize_transaction_type(_parse_text(args, 'type')),
        category=normalize_category(_parse_text(args, 'category')),
        min_price=_parse_price(args, 'minPrice'),
        max_price=_parse_price(args, 'maxPrice'),
        search=_parse_text(args, 'search'),
    )
