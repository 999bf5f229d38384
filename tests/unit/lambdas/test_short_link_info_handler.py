import json
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from tinylinks.dao.exceptions import DataStoreError
from tinylinks.lambdas.short_link_info import app


@pytest.fixture
def patch_service(monkeypatch, service):
    monkeypatch.setattr(app, 'short_link_service', lambda: service)
    return service


@freeze_time('2025-10-15 12:00:00')
def test_short_link_info(patch_service):
    shortcode = patch_service.shorten('https://example.com', expiration_in_minutes=60)

    response = app.lambda_handler({'queryStringParameters': {'shortLink': shortcode}}, None)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {
        'url': 'https://example.com',
        'created_at': '2025-10-15T12:00:00+00:00',
        'expiration_in_minutes': 60,
    }


def test_short_link_info_unknown(patch_service):
    response = app.lambda_handler({'queryStringParameters': {'shortLink': 'zzz'}}, None)

    assert response['statusCode'] == 404
    assert json.loads(response['body'])['errorCode'] == 'SHORT_LINK_NOT_FOUND'


@pytest.mark.parametrize('event', [{}, {'queryStringParameters': None}, {'queryStringParameters': {'shortLink': ''}}])
def test_short_link_info_missing_parameter(patch_service, event):
    response = app.lambda_handler(event, None)

    assert response['statusCode'] == 400
    assert json.loads(response['body']) == {
        'message': "Bad Request (missing 'shortLink' query parameter)",
        'errorCode': 'MISSING_SHORT_LINK',
    }


def test_short_link_info_data_store_unavailable(monkeypatch):
    service = MagicMock()
    service.short_link_info.side_effect = DataStoreError("Can't connect to Redis at localhost:6479/0.")
    monkeypatch.setattr(app, 'short_link_service', lambda: service)

    response = app.lambda_handler({'queryStringParameters': {'shortLink': '1'}}, None)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'DATA_STORE_UNAVAILABLE'


def test_short_link_info_corrupted_document(patch_service):
    patch_service.dao.set(patch_service.keys.link_detail_key('1'), '{"created_at": "2025-10-15T12:00:00+00:00"}')

    response = app.lambda_handler({'queryStringParameters': {'shortLink': '1'}}, None)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'DATA_STORE_UNAVAILABLE'
