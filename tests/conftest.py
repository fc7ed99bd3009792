from unittest.mock import MagicMock

import pytest

from directions.route.client import DirectionsClient
from directions.route.common import DirectionsConfig

# Reference vector: (38.5, -120.2), (40.7, -120.95), (43.252, -126.453)
REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
# First point of the reference vector alone: (38.5, -120.2)
SINGLE_POINT_POLYLINE = "_p~iF~ps|U"

BASE_URL = "https://maps.example.test/maps/api/directions/json"


def make_step(points, meters=100, lat=0.0, lng=0.0):
    return {
        "polyline": {"points": points},
        "distance": {"text": f"{meters} m", "value": meters},
        "duration": {"text": "1 min", "value": 60},
        "end_location": {"lat": lat, "lng": lng},
    }


def make_leg(steps, meters, seconds):
    return {
        "steps": steps,
        "distance": {"value": meters},
        "duration": {"value": seconds},
    }


def two_leg_payload(fare=None):
    route = {
        "legs": [
            make_leg([make_step(REFERENCE_POLYLINE, 400, 43.252, -126.453)], 1000, 60),
            make_leg(
                [
                    make_step(SINGLE_POINT_POLYLINE, 1200, 38.5, -120.2),
                    make_step(SINGLE_POINT_POLYLINE, 1300, 38.5, -120.2),
                ],
                2500,
                90,
            ),
        ]
    }
    if fare is not None:
        route["fare"] = fare
    return {"status": "OK", "routes": [route, {"legs": []}]}


def make_response(body, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(body, Exception):
        resp.json.side_effect = body
        resp.text = "<html>oops</html>"
    else:
        resp.json.return_value = body
    return resp


def make_session(body=None, *, exc=None, status_code=200):
    session = MagicMock()
    if exc is not None:
        session.send.side_effect = exc
    else:
        session.send.return_value = make_response(body, status_code)
    return session


@pytest.fixture
def cfg():
    return DirectionsConfig(api_key="test-key")


@pytest.fixture
def client_for(cfg):
    def _factory(body=None, *, exc=None, status_code=200):
        return DirectionsClient(cfg, session=make_session(body, exc=exc, status_code=status_code))
    return _factory
