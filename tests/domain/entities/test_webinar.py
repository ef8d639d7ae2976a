"""Unit tests for Webinar entity."""

from datetime import datetime, timedelta, timezone

import pytest
from domain.entities import Webinar, MAX_SEATS, MIN_SEATS
from domain.errors import ErrorCode, ValidationError


def make_webinar(**overrides) -> Webinar:
    data = {
        "id": "webinar-id",
        "organizer_id": "alice",
        "title": "Webinar title",
        "start_date": datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc),
        "end_date": datetime(2026, 2, 1, 11, 0, tzinfo=timezone.utc),
        "seats": 100,
    }
    data.update(overrides)
    return Webinar(**data)


class TestWebinarSeatsValidation:
    """Test the seats bound enforced at construction."""

    @pytest.mark.parametrize("seats", [MIN_SEATS, 2, 500, 999, MAX_SEATS])
    def test_seats_within_bounds_are_accepted(self, seats):
        """Test that seats between 1 and 1000 are valid."""
        webinar = make_webinar(seats=seats)
        assert webinar.seats == seats

    @pytest.mark.parametrize("seats", [0, -1, -100])
    def test_seats_below_one_raise_error(self, seats):
        """Test that zero or negative seats raise ValidationError."""
        with pytest.raises(ValidationError, match="at least 1 seat"):
            make_webinar(seats=seats)

    @pytest.mark.parametrize("seats", [1001, 2000])
    def test_seats_above_limit_raise_error(self, seats):
        """Test that more than 1000 seats raise ValidationError."""
        with pytest.raises(ValidationError, match="at most 1000 seats"):
            make_webinar(seats=seats)

    @pytest.mark.parametrize("seats", ["30", 30.5, None, True])
    def test_non_integer_seats_raise_error(self, seats):
        """Test that seats must be an actual integer."""
        with pytest.raises(ValidationError, match="must be an integer"):
            make_webinar(seats=seats)

    def test_validation_error_carries_code(self):
        """Test that the raised error exposes the validation code."""
        with pytest.raises(ValidationError) as exc_info:
            make_webinar(seats=0)
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
        assert str(exc_info.value).startswith("VALIDATION_ERROR: ")


class TestWebinarTitleValidation:
    """Test the non-empty title rule."""

    def test_empty_title_raises_error(self):
        """Test that an empty title raises ValidationError."""
        with pytest.raises(ValidationError, match="title cannot be empty"):
            make_webinar(title="")

    def test_whitespace_only_title_raises_error(self):
        """Test that a whitespace-only title raises ValidationError."""
        with pytest.raises(ValidationError, match="title cannot be empty"):
            make_webinar(title="   ")


class TestWebinarDates:
    """Test date handling."""

    def test_naive_dates_are_read_as_utc(self):
        """Test that naive datetimes get the UTC timezone."""
        webinar = make_webinar(
            start_date=datetime(2026, 2, 1, 10, 0),
            end_date=datetime(2026, 2, 1, 11, 0),
        )
        assert webinar.start_date == datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc)
        assert webinar.start_date.tzinfo is not None

    def test_aware_dates_are_converted_to_utc(self):
        """Test that offsets are normalized to UTC."""
        paris = timezone(timedelta(hours=1))
        webinar = make_webinar(start_date=datetime(2026, 2, 1, 11, 0, tzinfo=paris))
        assert webinar.start_date.utcoffset() == timedelta(0)
        assert webinar.start_date.hour == 10

    def test_start_equal_to_end_is_allowed(self):
        """Test that start == end does not fail (not enforced)."""
        moment = datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc)
        webinar = make_webinar(start_date=moment, end_date=moment)
        assert webinar.start_date == webinar.end_date

    def test_non_datetime_raises_error(self):
        """Test that a string date is rejected."""
        with pytest.raises(ValidationError):
            make_webinar(start_date="2026-02-01")


class TestWebinarIsTooSoon:
    """Test the lead time check."""

    def test_starting_in_less_than_three_days_is_too_soon(self):
        """Test that a start 2 days from now is too soon."""
        webinar = make_webinar()
        now = webinar.start_date - timedelta(days=2)
        assert webinar.is_too_soon(now) is True

    def test_starting_in_exactly_three_days_is_not_too_soon(self):
        """Test the boundary: exactly the lead time is accepted."""
        webinar = make_webinar()
        now = webinar.start_date - timedelta(days=3)
        assert webinar.is_too_soon(now) is False

    def test_custom_lead_time(self):
        """Test that the lead time can be changed."""
        webinar = make_webinar()
        now = webinar.start_date - timedelta(days=5)
        assert webinar.is_too_soon(now, timedelta(days=7)) is True
        assert webinar.is_too_soon(now, timedelta(days=1)) is False


class TestWebinarUpdate:
    """Test Webinar.update()."""

    def test_update_seats(self):
        """Test that seats can be changed."""
        webinar = make_webinar(seats=10)
        result = webinar.update(seats=30)
        assert result is None
        assert webinar.seats == 30

    def test_update_allows_decreasing_seats(self):
        """Test that seats may go down."""
        webinar = make_webinar(seats=100)
        webinar.update(seats=5)
        assert webinar.seats == 5

    @pytest.mark.parametrize("seats", [0, 1001])
    def test_invalid_update_leaves_webinar_unchanged(self, seats):
        """Test that a rejected update does not mutate the entity."""
        webinar = make_webinar(seats=10)
        with pytest.raises(ValidationError):
            webinar.update(seats=seats)
        assert webinar.seats == 10

    @pytest.mark.parametrize("field", ["id", "organizer_id", "title", "unknown"])
    def test_update_of_non_mutable_field_raises_error(self, field):
        """Test that only seats can be updated."""
        webinar = make_webinar()
        before = webinar.to_dict()
        with pytest.raises(ValidationError, match="Cannot update"):
            webinar.update(**{field: "changed"})
        assert webinar.to_dict() == before


class TestWebinarSnapshot:
    """Test read access and ownership helpers."""

    def test_props_snapshot(self):
        """Test that props returns every attribute."""
        webinar = make_webinar()
        assert webinar.props == {
            "id": "webinar-id",
            "organizer_id": "alice",
            "title": "Webinar title",
            "start_date": datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc),
            "end_date": datetime(2026, 2, 1, 11, 0, tzinfo=timezone.utc),
            "seats": 100,
        }

    def test_props_is_a_copy(self):
        """Test that editing the snapshot does not touch the entity."""
        webinar = make_webinar()
        webinar.props["seats"] = 1
        assert webinar.seats == 100

    def test_is_organizer(self):
        """Test ownership check."""
        webinar = make_webinar()
        assert webinar.is_organizer("alice") is True
        assert webinar.is_organizer("bob") is False

    def test_copy_is_independent(self):
        """Test that copy() returns a separate entity."""
        webinar = make_webinar()
        clone = webinar.copy()
        clone.update(seats=1)
        assert webinar.seats == 100
        assert clone == make_webinar(seats=1)
