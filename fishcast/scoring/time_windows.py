"""Feeding-window ranking over one day of hourly weather."""

from datetime import datetime, timedelta

from fishcast.models.common import clamp, round_half_up
from fishcast.models.conditions import DaySunEvents, HourlyRecord
from fishcast.models.recommendation import TimeWindow

HOURS_PER_DAY = 24
MAX_WINDOWS = 6
MIN_WINDOW_SCORE = 10

CALM_WIND_LIMIT_MPH = 10.0
IDEAL_WIND_MPH = 6.0
CLOUD_RANGE = (30.0, 80.0)
CLOUD_IN_RANGE_POINTS = 5
CLOUD_OUT_OF_RANGE_POINTS = 2
SUN_EVENT_BONUS = 8
SUN_EVENT_RADIUS = timedelta(minutes=90)


def _near(ts: datetime, event: datetime | None) -> bool:
    if event is None:
        return False
    return abs(ts - event) <= SUN_EVENT_RADIUS


def hour_score(record: HourlyRecord, sun: DaySunEvents | None) -> int:
    """Heuristic feeding score for one hour.

    Unknown wind earns no wind points; unknown cloud cover earns the
    out-of-range points.
    """
    score = 0.0
    wind = record.wind_mph
    if wind is not None and wind <= CALM_WIND_LIMIT_MPH:
        score += CALM_WIND_LIMIT_MPH - abs(wind - IDEAL_WIND_MPH)

    cloud = record.cloud_pct
    if cloud is not None and CLOUD_RANGE[0] <= cloud <= CLOUD_RANGE[1]:
        score += CLOUD_IN_RANGE_POINTS
    else:
        score += CLOUD_OUT_OF_RANGE_POINTS

    if sun is not None:
        if _near(record.time, sun.sunrise):
            score += SUN_EVENT_BONUS
        if _near(record.time, sun.sunset):
            score += SUN_EVENT_BONUS

    return round_half_up(clamp(score, 0, 100))


def rank_time_windows(
    sun: DaySunEvents | None, hourly: list[HourlyRecord]
) -> list[TimeWindow]:
    """Best hours of the day, highest score first, at most six.

    Hours scoring below 10 are dropped. Ties keep their original hourly order.
    """
    windows = [
        TimeWindow(time=h.time, score=hour_score(h, sun))
        for h in hourly[:HOURS_PER_DAY]
    ]
    windows = [w for w in windows if w.score >= MIN_WINDOW_SCORE]
    # Stable sort: equal scores stay in hourly order.
    windows.sort(key=lambda w: w.score, reverse=True)
    return windows[:MAX_WINDOWS]
