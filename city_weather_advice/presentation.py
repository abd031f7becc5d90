"""Turns a resolved place, a weather sample and its advice into the strings a display shows."""
from collections import namedtuple

from dateutil import parser

from city_weather_advice import config
from city_weather_advice.advisory import advisory_text
from city_weather_advice.measurement import Numeric
from city_weather_advice.utility import round_half_up

__all__ = ['DisplayFields', 'present', 'format_temperature', 'format_percent', 'format_updated_at']

TIMESTAMP_FORMAT = '%d %b %Y, %H:%M'

DisplayFields = namedtuple('DisplayFields', ['location', 'temperature', 'humidity', 'rain_chance', 'advice',
                                             'updated_at'])


def format_temperature(reading: Numeric) -> str:
    return f'{reading.value:.1f}' if reading.is_known else config.UNKNOWN_PLACEHOLDER


def format_percent(reading: Numeric) -> str:
    return str(round_half_up(reading.value)) if reading.is_known else config.UNKNOWN_PLACEHOLDER


def format_updated_at(observed_at) -> str:
    """ 'Updated: 01 Jun 2024, 12:00', or 'Updated: now' when the timestamp isn't ISO 8601 """
    if not observed_at:
        return 'Updated: now'
    try:
        when = parser.isoparse(observed_at)
    except (TypeError, ValueError, OverflowError):
        return 'Updated: now'
    return f'Updated: {when.strftime(TIMESTAMP_FORMAT)}'


def present(place, sample, advisory) -> DisplayFields:
    return DisplayFields(location=place.display_name,
                         temperature=format_temperature(sample.temperature_c),
                         humidity=format_percent(sample.humidity_pct),
                         rain_chance=format_percent(sample.rain_chance_pct),
                         advice=advisory_text(advisory),
                         updated_at=format_updated_at(sample.observed_at))
