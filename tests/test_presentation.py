import math

from pytest import mark

from city_weather_advice import config
from city_weather_advice.location import Place
from city_weather_advice.measurement import UNKNOWN, Known
from city_weather_advice.presentation import format_percent, format_temperature, format_updated_at, present
from city_weather_advice.weather_observation import WeatherSample


@mark.parametrize("reading, expected", [
    (Known(37), '37.0'),
    (Known(-3.25), '-3.2'),
    (Known(21.66), '21.7'),
    (UNKNOWN, config.UNKNOWN_PLACEHOLDER),
])
def test_format_temperature(reading, expected):
    assert format_temperature(reading) == expected


@mark.parametrize("reading, expected", [
    (Known(20), '20'),
    (Known(64.5), '65'),
    (Known(0.4), '0'),
    (UNKNOWN, config.UNKNOWN_PLACEHOLDER),
])
def test_format_percent(reading, expected):
    assert format_percent(reading) == expected


@mark.parametrize("observed_at, expected", [
    ('2024-06-01T12:00', 'Updated: 01 Jun 2024, 12:00'),
    ('2024-12-31T23:45:10', 'Updated: 31 Dec 2024, 23:45'),
    ('not a time', 'Updated: now'),
    ('5', 'Updated: now'),
    ('June 1st', 'Updated: now'),
    ('', 'Updated: now'),
    (None, 'Updated: now'),
])
def test_format_updated_at(observed_at, expected):
    assert format_updated_at(observed_at) == expected


def test_present():
    place = Place('Jaipur', 26.9, 75.8, region='Rajasthan', country='India')
    sample = WeatherSample(Known(24.04), UNKNOWN, Known(49.5), observed_at='2024-06-01T08:15')
    fields = present(place, sample, ['one.', 'two.'])
    assert fields.location == 'Jaipur, Rajasthan, India'
    assert fields.temperature == '24.0'
    assert fields.humidity == config.UNKNOWN_PLACEHOLDER
    assert fields.rain_chance == '50'
    assert fields.advice == 'one. two.'
    assert fields.updated_at == 'Updated: 01 Jun 2024, 08:15'


@mark.parametrize("raw", [math.nan, math.inf, -math.inf])
def test_non_finite_readings_render_placeholder(raw):
    sample = WeatherSample(raw, raw, raw, observed_at='2024-06-01T12:00')
    assert format_temperature(sample.temperature_c) == config.UNKNOWN_PLACEHOLDER
    assert format_percent(sample.humidity_pct) == config.UNKNOWN_PLACEHOLDER
    assert format_percent(sample.rain_chance_pct) == config.UNKNOWN_PLACEHOLDER
