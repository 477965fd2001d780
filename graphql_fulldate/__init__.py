from graphql_fulldate.exceptions import DateScalarError, InvalidTypeError, InvalidValueError
from graphql_fulldate.metadata import __version__
from graphql_fulldate.scalars.date import date_scalar, GraphQLDateType, type_defs

__all__ = [
    "DateScalarError",
    "GraphQLDateType",
    "InvalidTypeError",
    "InvalidValueError",
    "__version__",
    "date_scalar",
    "type_defs",
]
