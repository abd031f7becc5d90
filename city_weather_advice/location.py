import logging

from city_weather_advice import config
from city_weather_advice.exceptions import NotFoundError, ValidationError
from city_weather_advice.utility import fetch_json

__all__ = ['Place', 'resolve_city']

logger = logging.getLogger(__name__)


class Place:
    """
    Encapsulates a place returned by the geocoding service
    """

    def __init__(self, name, latitude, longitude, region='', country='', timezone=config.DEFAULT_TIMEZONE):
        """
        :param name: localized name of the place
        :param latitude: decimal degrees
        :param longitude: decimal degrees
        :param region: first-level administrative area, dropped if it just repeats the name
        :param country: country name
        :param timezone: IANA timezone of the place, 'auto' when the geocoder didn't say
        """
        self._name = name
        self._region = region if region and region != name else ''
        self._country = country or ''
        self._lat = latitude
        self._long = longitude
        self._timezone = timezone or config.DEFAULT_TIMEZONE

    @classmethod
    def from_geocoding_match(cls, match: dict):
        return cls(name=match.get('name'),
                   latitude=match.get('latitude'),
                   longitude=match.get('longitude'),
                   region=match.get('admin1') or '',
                   country=match.get('country') or '',
                   timezone=match.get('timezone') or config.DEFAULT_TIMEZONE)

    @property
    def name(self):
        return self._name

    @property
    def region(self):
        return self._region

    @property
    def country(self):
        return self._country

    @property
    def latitude(self):
        return self._lat

    @property
    def longitude(self):
        return self._long

    @property
    def timezone(self):
        return self._timezone

    def repl(self, sep=', '):
        """
        Get the representation of this place, leaving out any part that is empty
        :param sep: The separator to use between the name, region and country
        :return: for instance 'Jaipur, Rajasthan, India'
        """
        return sep.join(part for part in [self._name, self._region, self._country] if part)

    @property
    def display_name(self):
        return self.repl()

    def __eq__(self, other):
        if not isinstance(other, Place):
            return NotImplemented
        return (self._name, self._region, self._country, self._lat, self._long, self._timezone) == \
               (other._name, other._region, other._country, other._lat, other._long, other._timezone)

    def __hash__(self):
        return hash((self._name, self._region, self._country, self._lat, self._long, self._timezone))

    def __str__(self):
        return self.display_name

    def __repr__(self):
        return '{0} ({1} @ {2},{3})'.format(object.__repr__(self), str(self), self._lat, self._long)


def resolve_city(name: str, session=None) -> Place:
    """
    Look a city up with the geocoding service and return the best match
    :param name: free text city name
    :param session: optional requests.Session
    :return: a Place built from the first result
    :raises ValidationError: if the name is blank
    :raises NotFoundError: if the service has no match
    :raises TransportError: if the service couldn't be reached
    """
    city = (name or '').strip()
    if not city:
        raise ValidationError('A city name is required')

    logger.debug(f'Geocoding {city!r}')
    data = fetch_json(config.GEOCODING_URL,
                      params={'name': city, 'count': 1, 'language': config.RESULT_LANGUAGE, 'format': 'json'},
                      session=session)
    results = data.get('results') if isinstance(data, dict) else None
    if not results:
        raise NotFoundError(f'City not found: {city}')

    place = Place.from_geocoding_match(results[0])
    logger.info(f'Resolved {city!r} to {place.display_name} ({place.latitude}, {place.longitude})')
    return place
