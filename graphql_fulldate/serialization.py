import calendar
from datetime import date, datetime
import json
import re

from dateutil.parser import isoparse

_FULL_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def validate_date(string: str) -> bool:
    """Check whether the string is an RFC 3339 full-date naming a real calendar day.

    The string must consist of exactly four digits, a dash, two digits, a dash and two digits.
    The month must be within 1..12 and the day must exist in that month, respecting leap years.
    Year 0000 is rejected because `datetime.date` cannot represent it.
    """
    if (match := _FULL_DATE.fullmatch(string)) is None:
        return False
    year, month, day = (int(g) for g in match.groups())
    if year < date.min.year or not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def validate_date_instance(value: date) -> bool:
    """Check that the date object is not a "not a time" sentinel such as `pandas.NaT`."""
    # NaT is a datetime subclass which is not equal to itself
    return value == value


def serialize_date(d: date) -> str:
    """Serialize a date object into a YYYY-MM-DD string.

    Only the calendar components are used, the time and the time zone of datetimes are ignored.
    """
    return "%04d-%02d-%02d" % (d.year, d.month, d.day)


def deserialize_date(string: str) -> date:
    """Deserialize a validated YYYY-MM-DD string to date."""
    return isoparse(string).date()


class FriendlyJson:
    """Allows to serialize datetime.datetime and datetime.date to JSON."""

    @classmethod
    def dumps(klass, data, **kwargs) -> str:
        """Wrap json.dumps to str() unsupported objects."""
        kwargs.pop("cls", None)
        return json.dumps(data, default=klass.serialize, **kwargs)

    @classmethod
    def serialize(klass, obj):
        """Format dates as full-dates, datetimes as RFC 3339 and everything else with str()."""
        if isinstance(obj, datetime):
            if obj != obj:
                # NaT
                return None
            return obj.isoformat()
        if isinstance(obj, date):
            return serialize_date(obj)
        if isinstance(obj, (set, frozenset, tuple)):
            return list(obj)
        return str(obj)
