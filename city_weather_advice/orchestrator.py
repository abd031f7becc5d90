"""
Runs one city lookup from start to finish: geocode, forecast, advice and presentation.

The advisor owns the only mutable state (the request state and the last fields shown) and talks to the
display through an AdvisorView, so the whole flow can be driven without a real screen.
"""
import enum
import logging
from abc import ABC, abstractmethod

from city_weather_advice import config
from city_weather_advice.advisory import build_advisory
from city_weather_advice.exceptions import RequestInProgressError
from city_weather_advice.location import resolve_city
from city_weather_advice.presentation import DisplayFields, present
from city_weather_advice.weather_observation import fetch_weather

__all__ = ['RequestState', 'AdvisorView', 'WeatherAdvisor']

logger = logging.getLogger(__name__)


class RequestState(enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    FAILED = 'failed'


class AdvisorView(ABC):
    """ What the advisor needs from whatever is showing the results """

    @abstractmethod
    def set_busy(self, busy: bool):
        """ Disable the control that starts a lookup while one is running """

    @abstractmethod
    def show_status(self, message: str):
        """ Show a short status line, an empty message clears it """

    @abstractmethod
    def show_results(self, fields: DisplayFields):
        pass


class WeatherAdvisor:

    def __init__(self, view: AdvisorView, resolver=resolve_city, fetcher=fetch_weather):
        """
        :param view: the display to update
        :param resolver: callable taking a city name and returning a Place
        :param fetcher: callable taking latitude and longitude and returning a WeatherSample
        """
        self._view = view
        self._resolver = resolver
        self._fetcher = fetcher
        self._state = RequestState.IDLE
        self._last_fields = None
        logger.debug("Creating an instance of %s", self.__class__.__name__)

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def last_fields(self) -> DisplayFields:
        return self._last_fields

    def request(self, city_text) -> RequestState:
        """ Look up the weather for a city and push the result to the view

        :param city_text: whatever the user typed
        :return: IDLE if the text was rejected, otherwise SUCCESS or FAILED
        :raises RequestInProgressError: if called while a lookup is already running
        """
        if self._state is RequestState.LOADING:
            raise RequestInProgressError('A weather lookup is already in progress')

        city = (city_text or '').strip()
        if not city:
            logger.debug('Ignoring an empty city name')
            self._view.show_status(config.EMPTY_CITY_MESSAGE)
            return RequestState.IDLE

        outcome = RequestState.FAILED
        try:
            self._set_loading(True)
            place = self._resolver(city)
            sample = self._fetcher(place.latitude, place.longitude)
            advisory = build_advisory(sample.temperature_c, sample.humidity_pct, sample.rain_chance_pct)
            fields = present(place, sample, advisory)
            self._view.show_results(fields)
            self._last_fields = fields
            self._state = RequestState.SUCCESS
            self._view.show_status('')
            outcome = RequestState.SUCCESS
            logger.info(f'Weather for {fields.location}: {fields.temperature} °C, humidity {fields.humidity} %, '
                        f'rain {fields.rain_chance} %')
        except Exception:
            logger.exception(f'Weather lookup for {city!r} failed')
            self._state = RequestState.FAILED
            self._view.show_status(config.FAILURE_MESSAGE)
        finally:
            self._set_loading(False)
        return outcome

    def _set_loading(self, is_loading):
        self._state = RequestState.LOADING if is_loading else RequestState.IDLE
        self._view.set_busy(is_loading)
        if is_loading:
            self._view.show_status(config.LOADING_MESSAGE)
