import logging
import datetime as dt

from city_weather_advice import config
from city_weather_advice.measurement import Numeric, UNKNOWN, as_numeric, read_float
from city_weather_advice.utility import fetch_json

__all__ = ['WeatherSample', 'FctKeys', 'fetch_weather']

logger = logging.getLogger(__name__)


class FctKeys:
    """
    Names of the forecast service fields, kept in one place so that the query and the parsing stay in step
    """
    CURRENT = 'current'
    DAILY = 'daily'
    TEMPERATURE = 'temperature_2m'
    HUMIDITY = 'relative_humidity_2m'
    PRECIPITATION = 'precipitation'
    PRECIP_PCT_MAX = 'precipitation_probability_max'
    TIME = 'time'


class WeatherSample:

    def __init__(self, temperature_c=UNKNOWN, humidity_pct=UNKNOWN, rain_chance_pct=UNKNOWN, observed_at=None):
        self._temperature_c = as_numeric(temperature_c)
        self._humidity_pct = as_numeric(humidity_pct)
        self._rain_chance_pct = as_numeric(rain_chance_pct)
        self._observed_at = observed_at if observed_at else dt.datetime.now().isoformat()

    @property
    def temperature_c(self) -> Numeric:
        return self._temperature_c

    @property
    def humidity_pct(self) -> Numeric:
        return self._humidity_pct

    @property
    def rain_chance_pct(self) -> Numeric:
        return self._rain_chance_pct

    @property
    def observed_at(self) -> str:
        return self._observed_at

    def __eq__(self, other):
        if not isinstance(other, WeatherSample):
            return NotImplemented
        return (self._temperature_c, self._humidity_pct, self._rain_chance_pct, self._observed_at) == \
               (other._temperature_c, other._humidity_pct, other._rain_chance_pct, other._observed_at)

    def __hash__(self):
        return hash((self._temperature_c, self._humidity_pct, self._rain_chance_pct, self._observed_at))

    def __str__(self):
        return f'Weather sample at {self._observed_at}' \
            f'\n\tTemperature: {self._temperature_c} °C' \
            f'\n\tHumidity: {self._humidity_pct} %' \
            f'\n\tChance of rain: {self._rain_chance_pct} %'

    @classmethod
    def from_forecast_json(cls, dct):
        """
        Converts the JSON returned from the forecast service into a sample.  Anything missing or
        not numeric becomes UNKNOWN rather than zero.
        :param dct: decoded forecast response
        :return: a WeatherSample
        """
        dct = dct if isinstance(dct, dict) else {}
        current = dct.get(FctKeys.CURRENT)
        current = current if isinstance(current, dict) else {}
        daily = dct.get(FctKeys.DAILY)
        daily = daily if isinstance(daily, dict) else {}

        rain_chance = UNKNOWN
        pop = daily.get(FctKeys.PRECIP_PCT_MAX)
        if isinstance(pop, list) and len(pop) > 0:
            rain_chance = read_float(pop[0])

        return cls(temperature_c=read_float(current.get(FctKeys.TEMPERATURE)),
                   humidity_pct=read_float(current.get(FctKeys.HUMIDITY)),
                   rain_chance_pct=rain_chance,
                   observed_at=current.get(FctKeys.TIME) or dt.datetime.now().isoformat())


def fetch_weather(latitude, longitude, session=None) -> WeatherSample:
    """
    Get the current conditions and today's rain chance for a pair of coordinates
    :param latitude: decimal degrees
    :param longitude: decimal degrees
    :param session: optional requests.Session
    :return: a WeatherSample
    :raises TransportError: if the forecast service couldn't be reached or answered badly
    """
    params = {'latitude': latitude,
              'longitude': longitude,
              'current': ','.join([FctKeys.TEMPERATURE, FctKeys.HUMIDITY, FctKeys.PRECIPITATION]),
              'daily': FctKeys.PRECIP_PCT_MAX,
              'forecast_days': config.forecast_days,
              'timezone': config.DEFAULT_TIMEZONE}
    logger.debug(f'Going out to the forecast service for ({latitude}, {longitude})')
    data = fetch_json(config.FORECAST_URL, params=params, session=session)
    sample = WeatherSample.from_forecast_json(data)
    logger.debug(f'{sample}')
    return sample
