"""Errors raised while turning a city name into weather advice."""


class WeatherAdviceError(Exception):
    """ Base class for everything the lookup pipeline raises """


class ValidationError(WeatherAdviceError, ValueError):
    """ The city text was empty once whitespace was stripped """


class TransportError(WeatherAdviceError, IOError):
    """ The request failed, came back with a non-success status or had a body that wasn't JSON """

    def __init__(self, message, status_code=None):
        super(TransportError, self).__init__(message)
        self.status_code = status_code


class NotFoundError(WeatherAdviceError, LookupError):
    """ The geocoding service answered but had no match for the city """


class RequestInProgressError(WeatherAdviceError, RuntimeError):
    """ A lookup was started while another one was still running """
