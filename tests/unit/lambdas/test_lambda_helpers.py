import json
from unittest.mock import patch

import pytest

from tinylinks.exceptions import MissingEnvironmentVariableError
from tinylinks.lambdas import helpers
from tinylinks.services import ShortLinkService


# -------------------------------
# short_link_service()
# -------------------------------


def test_short_link_service_from_environment(monkeypatch):
    monkeypatch.setenv('TINYURL_APP_REDIS_ADDR', 'redis.internal:6380')
    monkeypatch.setenv('TINYURL_APP_REDIS_PWD', 's3cret')
    monkeypatch.delenv('TINYURL_APP_REDIS_USER', raising=False)
    monkeypatch.delenv('TINYURL_APP_REDIS_DB', raising=False)
    monkeypatch.delenv('TINYURL_APP_REDIS_TIMEOUT', raising=False)
    monkeypatch.delenv('TINYURL_APP_KEY_PREFIX', raising=False)

    with patch.object(helpers, 'KeyValueRedisDAO') as dao_mock:
        service = helpers.short_link_service()

    dao_mock.assert_called_once_with(
        redis_host='redis.internal',
        redis_port=6380,
        redis_db=0,
        redis_username=None,
        redis_password='s3cret',
        redis_socket_timeout=5.0,
        prefix='go_tiny_url',
    )
    assert isinstance(service, ShortLinkService)
    assert service.dao is dao_mock.return_value


def test_short_link_service_without_redis_addr(monkeypatch):
    monkeypatch.delenv('TINYURL_APP_REDIS_ADDR', raising=False)

    with pytest.raises(MissingEnvironmentVariableError, match='TINYURL_APP_REDIS_ADDR'):
        helpers.short_link_service()


# -------------------------------
# json_body()
# -------------------------------


def test_json_body():
    assert helpers.json_body({'body': '{"url": "https://example.com"}'}) == {'url': 'https://example.com'}
    assert helpers.json_body({'body': None}) == {}


@pytest.mark.parametrize('body, message', [('{oops', 'invalid JSON body'), ('"text"', 'JSON body must be an object')])
def test_json_body_invalid(body, message):
    with pytest.raises(ValueError, match=message):
        helpers.json_body({'body': body})


# -------------------------------
# Responses
# -------------------------------


def test_response_307_has_only_location_header():
    response = helpers.response_307(location='https://example.com')
    assert response == {'statusCode': 307, 'headers': {'Location': 'https://example.com'}, 'body': '{}'}


def test_error_responses_without_details():
    response = helpers.response_404()
    assert response['headers'] == {'Content-Type': 'application/json'}
    assert json.loads(response['body']) == {'message': 'Not Found'}


def test_guarantee_500_response():
    @helpers.guarantee_500_response
    def lambda_handler(event, context):
        raise KeyError('boom')

    response = lambda_handler({}, None)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'
