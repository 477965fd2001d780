from datetime import date
import math
from typing import Any, Dict, Optional

from ariadne import ScalarType
from graphql import GraphQLScalarType, StringValueNode, ValueNode

from graphql_fulldate.exceptions import InvalidTypeError, InvalidValueError
from graphql_fulldate.serialization import (
    deserialize_date,
    FriendlyJson,
    serialize_date,
    validate_date,
    validate_date_instance,
)

DESCRIPTION = (
    "A date string, such as 2007-12-03, compliant with the `full-date` "
    "format outlined in section 5.6 of the RFC 3339 profile of the "
    "ISO 8601 standard for representation of dates and times using "
    "the Gregorian calendar."
)
SPECIFIED_BY_URL = "https://datatracker.ietf.org/doc/html/rfc3339#section-5.6"


def _render(value: Any) -> str:
    # JSON-like text for error messages, non-finite floats become null
    if isinstance(value, float) and not math.isfinite(value):
        return "null"
    try:
        return FriendlyJson.dumps(value, allow_nan=False)
    except (TypeError, ValueError):
        # non-string keys, circular references, nested NaN
        return str(value)


def serialize(value: Any) -> str:
    """Convert a date or a full-date string to the full-date string sent to the client."""
    if isinstance(value, date):
        if validate_date_instance(value):
            return serialize_date(value)
        raise InvalidValueError("Date cannot represent an invalid date instance", value)
    if isinstance(value, str):
        if validate_date(value):
            return value
        raise InvalidValueError(f"Date cannot represent an invalid date-string {value}.", value)
    raise InvalidTypeError(
        "Date cannot represent a non string, or non date type " + _render(value),
        value,
    )


def _parse_string(value: str) -> date:
    # the time of day and the zone are dropped: "2007-12-03T10:15:00Z" -> 2007-12-03
    trimmed_value = value.split("T", 1)[0]
    if validate_date(trimmed_value):
        return deserialize_date(trimmed_value)
    raise InvalidValueError(f"Date cannot represent an invalid date-string {value}.", value)


def parse_value(value: Any) -> date:
    """Convert a variable value supplied by the client to date."""
    if not isinstance(value, str):
        raise InvalidTypeError(
            "Date cannot represent non string type " + _render(value), value,
        )
    return _parse_string(value)


def parse_literal(ast: ValueNode, _variables: Optional[Dict[str, Any]] = None) -> date:
    """Convert a value written inline in the query document to date."""
    if not isinstance(ast, StringValueNode):
        value = getattr(ast, "value", None)
        raise InvalidTypeError(
            "Date cannot represent non string type %s" % (value if value is not None else "null"),
            value,
        )
    return _parse_string(ast.value)


GraphQLDateType = GraphQLScalarType(
    name="Date",
    description=DESCRIPTION,
    serialize=serialize,
    parse_value=parse_value,
    parse_literal=parse_literal,
    specified_by_url=SPECIFIED_BY_URL,
)

type_defs = f'''
"""
{DESCRIPTION}
"""
scalar Date @specifiedBy(url: "{SPECIFIED_BY_URL}")
'''

date_scalar = ScalarType(
    "Date",
    serializer=serialize,
    value_parser=parse_value,
    literal_parser=parse_literal,
)
