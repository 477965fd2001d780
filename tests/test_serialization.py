from datetime import date, datetime, timezone

import pandas as pd
import pytest

from graphql_fulldate.serialization import (
    deserialize_date,
    FriendlyJson,
    serialize_date,
    validate_date,
    validate_date_instance,
)


class TestValidateDate:
    @pytest.mark.parametrize(
        "value", ["2007-12-03", "2020-02-29", "2000-02-29", "1900-02-28", "0001-01-01",
                  "9999-12-31", "2021-04-30"],
    )
    def test_valid(self, value: str) -> None:
        assert validate_date(value)

    @pytest.mark.parametrize(
        "value", ["2019-02-29", "1900-02-29", "2021-04-31", "2021-13-01", "2021-00-01",
                  "2021-01-00", "2021-01-32", "0000-01-01", "07-12-03", "2007-1-03",
                  "2007/12/03", "2007-12-03\n", "2007-12-03T00:00:00", "２００７-１２-０３"],
    )
    def test_invalid(self, value: str) -> None:
        assert not validate_date(value)


class TestDateInstance:
    def test_valid(self) -> None:
        assert validate_date_instance(date(2007, 12, 3))
        assert validate_date_instance(pd.Timestamp("2007-12-03"))

    def test_not_a_time(self) -> None:
        assert not validate_date_instance(pd.NaT)

    def test_serialize(self) -> None:
        assert serialize_date(date(2007, 12, 3)) == "2007-12-03"
        assert serialize_date(datetime(999, 2, 1, 23, 59, tzinfo=timezone.utc)) == "0999-02-01"

    def test_deserialize(self) -> None:
        d = deserialize_date("2007-12-03")
        assert d == date(2007, 12, 3)
        assert type(d) is date


class TestFriendlyJson:
    def test_dates(self) -> None:
        obj = [date(1984, 5, 1), datetime(2020, 3, 18, tzinfo=timezone.utc), pd.NaT]
        assert FriendlyJson.dumps(obj) == '["1984-05-01", "2020-03-18T00:00:00+00:00", null]'

    def test_unsupported_object(self) -> None:
        class Opaque:
            def __str__(self) -> str:
                return "opaque"

        assert FriendlyJson.dumps({"a": Opaque()}) == '{"a": "opaque"}'
        assert FriendlyJson.dumps((1, {2})) == "[1, [2]]"
