import pytest

from lensroster.services.scheduling.timeslots import (
    InvalidTimeError,
    InvalidWindowError,
    time_to_minutes,
    minutes_to_time,
    overlaps,
    merge_intervals,
    window_bounds,
)


class TestTimeToMinutes:
    def test_parses_hours_and_minutes(self):
        assert time_to_minutes("09:30") == 570

    def test_midnight(self):
        assert time_to_minutes("00:00") == 0

    def test_single_digit_hour(self):
        assert time_to_minutes("9:05") == 545

    def test_seconds_ignored(self):
        assert time_to_minutes("13:15:00") == 795

    @pytest.mark.parametrize("value", ["", "0930", "ab:cd", "9.30", "12:5", None])
    def test_malformed_raises(self, value):
        with pytest.raises(InvalidTimeError):
            time_to_minutes(value)

    @pytest.mark.parametrize("value", ["24:00", "12:60"])
    def test_out_of_range_raises(self, value):
        with pytest.raises(InvalidTimeError):
            time_to_minutes(value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            time_to_minutes("nope")


class TestMinutesToTime:
    def test_zero_padded(self):
        assert minutes_to_time(545) == "09:05"

    def test_last_minute_of_day(self):
        assert minutes_to_time(1439) == "23:59"

    @pytest.mark.parametrize("value", [-1, 1440])
    def test_outside_day_raises(self, value):
        with pytest.raises(InvalidTimeError):
            minutes_to_time(value)


class TestOverlaps:
    def test_no_overlap(self):
        assert overlaps(480, 600, 720, 840) is False

    def test_adjacent_no_overlap(self):
        # event ending exactly when a class starts is not a conflict
        assert overlaps(540, 600, 600, 660) is False

    def test_overlap(self):
        assert overlaps(480, 840, 720, 1080) is True

    def test_containment(self):
        assert overlaps(540, 720, 600, 630) is True


class TestMergeIntervals:
    def test_empty(self):
        assert merge_intervals([]) == []

    def test_merges_overlapping(self):
        assert merge_intervals([(540, 600), (570, 660)]) == [(540, 660)]

    def test_merges_adjacent(self):
        assert merge_intervals([(540, 600), (600, 660)]) == [(540, 660)]

    def test_sorts_first(self):
        assert merge_intervals([(700, 720), (540, 600)]) == [(540, 600), (700, 720)]

    def test_contained_interval_absorbed(self):
        assert merge_intervals([(540, 720), (600, 630)]) == [(540, 720)]


class TestWindowBounds:
    def test_valid_window(self):
        assert window_bounds("09:00", "11:00") == (540, 660)

    def test_inverted_raises(self):
        with pytest.raises(InvalidWindowError):
            window_bounds("11:00", "09:00")

    def test_empty_window_raises(self):
        with pytest.raises(InvalidWindowError):
            window_bounds("09:00", "09:00")

    def test_midnight_crossing_raises(self):
        with pytest.raises(InvalidWindowError):
            window_bounds("22:00", "01:00")

    def test_malformed_time_raises(self):
        with pytest.raises(InvalidTimeError):
            window_bounds("9am", "11:00")
