"""Unit tests for the shorten_url Lambda handler

Test coverage includes:

1. Successful shortening
   - Responds with 201 and the short link, deduplicating identical URLs.

2. Bad requests
   - Invalid JSON, missing URL, malformed URL and invalid expiration respond with 400.

3. Server errors
   - Data store errors respond with 500 and DATA_STORE_UNAVAILABLE.
   - Missing configuration responds with 500 and UNKNOWN_INTERNAL_SERVER_ERROR.
"""

import json
from unittest.mock import MagicMock

import pytest

from tinylinks.dao.exceptions import DataStoreError
from tinylinks.lambdas.shorten_url import app


@pytest.fixture
def patch_service(monkeypatch, service):
    monkeypatch.setattr(app, 'short_link_service', lambda: service)
    return service


def make_event(body) -> dict:
    return {'body': body if isinstance(body, str) else json.dumps(body)}


# -------------------------------
# 1. Successful shortening
# -------------------------------


def test_shorten_url(patch_service):
    response = app.lambda_handler(make_event({'url': 'https://example.com', 'expiration_in_minutes': 60}), None)

    assert response['statusCode'] == 201
    assert response['headers']['Content-Type'] == 'application/json'
    assert json.loads(response['body']) == {'short_link': '1'}
    assert patch_service.unshorten('1') == 'https://example.com'


def test_shorten_same_url_twice(patch_service):
    first = app.lambda_handler(make_event({'url': 'https://example.com'}), None)
    second = app.lambda_handler(make_event({'url': 'https://example.com'}), None)

    assert json.loads(first['body']) == json.loads(second['body']) == {'short_link': '1'}


# -------------------------------
# 2. Bad requests
# -------------------------------


@pytest.mark.parametrize(
    'body',
    [
        '{not json',
        '[1, 2, 3]',
        {},
        {'url': ''},
        {'url': 123},
        {'url': 'not-a-url'},
        {'url': 'http://[::1'},
        {'url': 'https://example.com', 'expiration_in_minutes': -1},
        {'url': 'https://example.com', 'expiration_in_minutes': '60'},
        {'url': 'https://example.com', 'expiration_in_minutes': 1.5},
        {'url': 'https://example.com', 'expiration_in_minutes': True},
    ],
)
def test_shorten_bad_request(patch_service, body):
    response = app.lambda_handler(make_event(body), None)

    assert response['statusCode'] == 400
    payload = json.loads(response['body'])
    assert payload['message'].startswith('Bad Request')
    assert payload['errorCode'] == 'INVALID_REQUEST_BODY'


def test_shorten_without_body(patch_service):
    response = app.lambda_handler({}, None)

    assert response['statusCode'] == 400
    assert json.loads(response['body'])['message'] == "Bad Request (missing 'url' in JSON body)"


# -------------------------------
# 3. Server errors
# -------------------------------


def test_shorten_data_store_unavailable(monkeypatch):
    service = MagicMock()
    service.shorten.side_effect = DataStoreError("Can't connect to Redis at localhost:6479/0.")
    monkeypatch.setattr(app, 'short_link_service', lambda: service)

    response = app.lambda_handler(make_event({'url': 'https://example.com'}), None)

    assert response['statusCode'] == 500
    assert json.loads(response['body']) == {
        'message': 'Internal Server Error (data store unavailable)',
        'errorCode': 'DATA_STORE_UNAVAILABLE',
    }


def test_shorten_without_configuration(monkeypatch):
    monkeypatch.delenv('TINYURL_APP_REDIS_ADDR', raising=False)

    response = app.lambda_handler(make_event({'url': 'https://example.com'}), None)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'
