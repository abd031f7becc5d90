from unittest import mock

from pytest import fixture


class FakeSession:
    """ Stands in for requests.Session, handing back canned responses in order """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'headers': headers, 'timeout': timeout})
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


def _json_response(payload=None, status_code=200, bad_json=False):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    if bad_json:
        resp.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
    else:
        resp.json.return_value = payload
    return resp


@fixture
def json_response():
    return _json_response


@fixture
def fake_session():
    return FakeSession


@fixture
def jaipur_geocoding():
    return {'results': [{'id': 1269515, 'name': 'Jaipur', 'latitude': 26.91962, 'longitude': 75.78781,
                         'country': 'India', 'admin1': 'Rajasthan', 'timezone': 'Asia/Kolkata'}],
            'generationtime_ms': 0.7}


@fixture
def jaipur_forecast():
    return {'latitude': 26.875, 'longitude': 75.75, 'timezone': 'Asia/Kolkata',
            'current': {'time': '2024-06-01T12:00', 'interval': 900, 'temperature_2m': 37,
                        'relative_humidity_2m': 20, 'precipitation': 0.0},
            'daily': {'time': ['2024-06-01'], 'precipitation_probability_max': [10]}}
