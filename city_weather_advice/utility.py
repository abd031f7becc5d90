import logging

import requests

from city_weather_advice import config
from city_weather_advice.exceptions import TransportError

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {'Cache-Control': 'no-cache', 'Pragma': 'no-cache'}


def fetch_json(url, params=None, session=None, timeout=None):
    """ GET a url and return the decoded JSON body

    Always goes to the network, there is one attempt and no retry.

    :param url: the endpoint to query
    :param params: query string parameters, requests takes care of the encoding
    :param session: an optional requests.Session to send the request through
    :param timeout: seconds to wait, defaults to config.REQUEST_TIMEOUT
    :return: the parsed body
    :raises TransportError: when the request fails, the status isn't a success or the body isn't JSON
    """
    http = session if session is not None else requests
    timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
    logger.debug(f'GET {url} {params}')
    try:
        resp = http.get(url, params=params, headers=NO_CACHE_HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f'Request to {url} failed: {e}') from e

    if not resp.ok:
        raise TransportError(f'HTTP {resp.status_code} from {url}', status_code=resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        raise TransportError(f'Response from {url} was not valid JSON', status_code=resp.status_code) from e


def round_half_up(value: float) -> int:
    """ Round the way people expect (2.5 -> 3), not the banker's rounding of round() """
    return int(value // 1 + (1 if value % 1 >= 0.5 else 0))
