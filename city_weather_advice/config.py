import os

import dotenv

dotenv.load_dotenv()

GEOCODING_URL: str = os.getenv('CITY_WEATHER_GEOCODING_URL', 'https://geocoding-api.open-meteo.com/v1/search')
FORECAST_URL: str = os.getenv('CITY_WEATHER_FORECAST_URL', 'https://api.open-meteo.com/v1/forecast')
# Language of the place names the geocoder returns, the advice text is written to match it
RESULT_LANGUAGE: str = os.getenv('CITY_WEATHER_LANGUAGE', 'hi')
REQUEST_TIMEOUT: float = float(os.getenv('CITY_WEATHER_TIMEOUT', '10'))
LOG_FILE: str = os.getenv('CITY_WEATHER_LOG_FILE', 'debug.log')

DEFAULT_TIMEZONE = 'auto'
UNKNOWN_PLACEHOLDER = '?'

forecast_days = 1

LOADING_MESSAGE = 'Fetching weather…'
EMPTY_CITY_MESSAGE = 'Please enter a city name.'
FAILURE_MESSAGE = 'City not found or service unavailable. Try another name.'
