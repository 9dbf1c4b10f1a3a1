"""Tests for feeding-window ranking."""

from datetime import datetime

from fishcast.models.conditions import DaySunEvents, HourlyRecord
from fishcast.scoring.time_windows import hour_score, rank_time_windows

SUN = DaySunEvents(sunrise=datetime(2026, 6, 15, 5, 30), sunset=datetime(2026, 6, 15, 20, 45))
NO_SUN = DaySunEvents()


class TestHourScore:
    def test_peak_wind_and_cloud(self, make_hour):
        assert hour_score(make_hour(12, wind=6, cloud=50), NO_SUN) == 15

    def test_wind_above_ten_scores_nothing(self, make_hour):
        assert hour_score(make_hour(12, wind=10.5, cloud=50), NO_SUN) == 5
        assert hour_score(make_hour(12, wind=10, cloud=50), NO_SUN) == 11

    def test_cloud_edges(self, make_hour):
        assert hour_score(make_hour(12, wind=6, cloud=30), NO_SUN) == 15
        assert hour_score(make_hour(12, wind=6, cloud=80), NO_SUN) == 15
        assert hour_score(make_hour(12, wind=6, cloud=81), NO_SUN) == 12
        assert hour_score(make_hour(12, wind=6, cloud=10), NO_SUN) == 12

    def test_unknown_readings(self, make_hour):
        assert hour_score(make_hour(12), NO_SUN) == 2

    def test_sunrise_bonus_is_inclusive_at_90_minutes(self, make_hour):
        assert hour_score(make_hour(4, wind=6, cloud=50), SUN) == 23
        assert hour_score(make_hour(7, wind=6, cloud=50), SUN) == 23
        assert hour_score(make_hour(7, wind=6, cloud=50, minute=1), SUN) == 15

    def test_both_bonuses_stack(self, make_hour):
        sun = DaySunEvents(
            sunrise=datetime(2026, 6, 15, 12, 0), sunset=datetime(2026, 6, 15, 13, 0)
        )
        assert hour_score(make_hour(12, wind=6, cloud=50, minute=30), sun) == 31

    def test_null_events_no_bonus(self, make_hour):
        assert hour_score(make_hour(5, wind=6, cloud=50), None) == 15
        sunset_only = DaySunEvents(sunset=datetime(2026, 6, 15, 5, 0))
        assert hour_score(make_hour(5, wind=6, cloud=50), sunset_only) == 23

    def test_fractional_wind_rounds_half_up(self, make_hour):
        # 10 - 0.5 + 5 = 14.5
        assert hour_score(make_hour(12, wind=6.5, cloud=50), NO_SUN) == 15


class TestRankTimeWindows:
    def test_empty(self):
        assert rank_time_windows(SUN, []) == []
        assert rank_time_windows(None, []) == []

    def test_day_ranking(self, make_hour):
        hourly = [make_hour(h, wind=2, cloud=50) for h in range(4)]  # 11 each
        hourly += [
            make_hour(4, wind=2, cloud=50),   # 19
            make_hour(5, wind=6, cloud=50),   # 23
            make_hour(6, wind=6, cloud=50),   # 23
            make_hour(7, wind=6, cloud=50),   # 23
            make_hour(8, wind=15, cloud=50),  # 5
            make_hour(20, wind=6, cloud=90),  # 20
            make_hour(21, wind=6, cloud=90),  # 20
            make_hour(22, wind=2, cloud=90),  # 16
        ]
        windows = rank_time_windows(SUN, hourly)
        assert [(w.time.hour, w.score) for w in windows] == [
            (5, 23), (6, 23), (7, 23), (20, 20), (21, 20), (4, 19),
        ]

    def test_at_most_six_and_all_at_least_ten(self, make_hour):
        hourly = [make_hour(h, wind=6, cloud=50) for h in range(24)]
        windows = rank_time_windows(NO_SUN, hourly)
        assert len(windows) == 6
        assert all(w.score >= 10 for w in windows)

    def test_low_scores_filtered(self, make_hour):
        hourly = [make_hour(h, wind=20, cloud=95) for h in range(24)]
        assert rank_time_windows(NO_SUN, hourly) == []

    def test_ties_keep_input_order(self, make_hour):
        hourly = [
            make_hour(9, wind=6, cloud=50),
            make_hour(3, wind=6, cloud=50),
            make_hour(14, wind=5, cloud=50),
            make_hour(1, wind=6, cloud=50),
        ]
        windows = rank_time_windows(NO_SUN, hourly)
        assert [w.time.hour for w in windows] == [9, 3, 1, 14]

    def test_only_first_24_hours(self):
        base = datetime(2026, 6, 15)
        hourly = [
            HourlyRecord(time=base.replace(hour=h), wind_mph=20, cloud_pct=95) for h in range(24)
        ]
        # a perfect hour on the following day must be ignored
        hourly.append(HourlyRecord(time=datetime(2026, 6, 16, 6), wind_mph=6, cloud_pct=50))
        assert rank_time_windows(NO_SUN, hourly) == []

    def test_does_not_mutate_input(self, make_hour):
        hourly = [make_hour(h, wind=h % 10, cloud=50) for h in range(10)]
        snapshot = list(hourly)
        rank_time_windows(SUN, hourly)
        assert hourly == snapshot
