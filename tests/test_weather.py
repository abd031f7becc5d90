import datetime as dt

import pytest
from pytest import mark

from city_weather_advice import config
from city_weather_advice.advisory import build_advisory
from city_weather_advice.exceptions import TransportError
from city_weather_advice.measurement import UNKNOWN, Known
from city_weather_advice.weather_observation import FctKeys, WeatherSample, fetch_weather


def test_fetch_weather(fake_session, json_response, jaipur_forecast):
    session = fake_session(json_response(jaipur_forecast))
    sample = fetch_weather(26.91962, 75.78781, session=session)
    assert sample.temperature_c == Known(37)
    assert sample.humidity_pct == Known(20)
    assert sample.rain_chance_pct == Known(10)
    assert sample.observed_at == '2024-06-01T12:00'

    call = session.calls[0]
    assert call['url'] == config.FORECAST_URL
    assert call['params'] == {'latitude': 26.91962, 'longitude': 75.78781,
                              'current': 'temperature_2m,relative_humidity_2m,precipitation',
                              'daily': 'precipitation_probability_max',
                              'forecast_days': 1, 'timezone': 'auto'}


def test_missing_humidity_is_unknown(jaipur_forecast):
    del jaipur_forecast['current']['relative_humidity_2m']
    sample = WeatherSample.from_forecast_json(jaipur_forecast)
    assert sample.humidity_pct is UNKNOWN
    assert sample.temperature_c == Known(37)
    # and the advice can still be built from it
    assert len(build_advisory(sample.temperature_c, sample.humidity_pct, sample.rain_chance_pct)) == 1


@mark.parametrize("current", [
    {'temperature_2m': None, 'relative_humidity_2m': 'n/a'},
    {'temperature_2m': 'warm', 'relative_humidity_2m': None},
    {},
])
def test_non_numeric_current_values(current):
    sample = WeatherSample.from_forecast_json({'current': current})
    assert sample.temperature_c is UNKNOWN
    assert sample.humidity_pct is UNKNOWN


@mark.parametrize("daily", [
    {'precipitation_probability_max': []},
    {'precipitation_probability_max': 55},
    {'precipitation_probability_max': [None]},
    {},
    None,
    'garbage',
], ids=['empty list', 'not a list', 'null entry', 'no key', 'null daily', 'not an object'])
def test_rain_chance_unknown(daily):
    sample = WeatherSample.from_forecast_json({'current': {'temperature_2m': 20}, 'daily': daily})
    assert sample.rain_chance_pct is UNKNOWN


def test_rain_chance_uses_first_day():
    sample = WeatherSample.from_forecast_json({'daily': {'precipitation_probability_max': [75, 5]}})
    assert sample.rain_chance_pct == Known(75)


def test_observed_at_defaults_to_now():
    before = dt.datetime.now()
    sample = WeatherSample.from_forecast_json({'current': {'temperature_2m': 20}})
    observed = dt.datetime.fromisoformat(sample.observed_at)
    assert before <= observed <= dt.datetime.now()


def test_empty_payload():
    sample = WeatherSample.from_forecast_json(None)
    assert sample.temperature_c is UNKNOWN
    assert sample.humidity_pct is UNKNOWN
    assert sample.rain_chance_pct is UNKNOWN


def test_sample_str():
    s = str(WeatherSample(30, None, 45, observed_at='2024-06-01T12:00'))
    assert 'Temperature: 30.0 °C' in s
    assert 'Humidity: unknown %' in s


def test_fetch_weather_service_down(fake_session, json_response):
    with pytest.raises(TransportError):
        fetch_weather(1.0, 2.0, session=fake_session(json_response(status_code=500)))


def test_query_asks_for_the_parsed_fields(fake_session, json_response, jaipur_forecast):
    session = fake_session(json_response(jaipur_forecast))
    fetch_weather(1.0, 2.0, session=session)
    params = session.calls[0]['params']
    assert FctKeys.TEMPERATURE in params['current'].split(',')
    assert FctKeys.HUMIDITY in params['current'].split(',')
    assert params['daily'] == FctKeys.PRECIP_PCT_MAX
