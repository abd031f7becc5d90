# -*- coding: utf-8 -*-
"""Top-level package for City Weather Advice."""
import logging

from city_weather_advice import config
from city_weather_advice.advisory import advisory_text, build_advisory
from city_weather_advice.exceptions import NotFoundError, RequestInProgressError, TransportError, \
    ValidationError, WeatherAdviceError
from city_weather_advice.location import Place, resolve_city
from city_weather_advice.measurement import UNKNOWN, Known
from city_weather_advice.orchestrator import AdvisorView, RequestState, WeatherAdvisor
from city_weather_advice.presentation import DisplayFields, present
from city_weather_advice.weather_observation import WeatherSample, fetch_weather

__author__ = """Michael Dereszynski"""
__email__ = 'mlderes@hotmail.com'
__version__ = '0.1.0'


def configure_logging(verbose=False):
    """ Send debug messages to the log file and INFO messages (DEBUG when verbose) to the console """
    logging.basicConfig(level=logging.DEBUG,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        filename=config.LOG_FILE,
                        filemode='w')
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    # create formatter and add it to the handlers
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    # add the handlers to the logger
    logging.getLogger('').addHandler(ch)
    # requests/urllib3 are chatty at debug level
    logging.getLogger('urllib3').setLevel(logging.WARNING)
