"""Shared building blocks of the HTTP handlers

Functions:
    short_link_service() -> ShortenerBaseService
        Build the Redis-backed shortening service from the environment
    guarantee_500_response(handler) -> Callable
        Decorator: turn any unhandled exception into a 500 response
    response_*(...) -> dict
        API Gateway Lambda Proxy response builders
"""

import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from tinylinks.constants import ENV, UNKNOWN_INTERNAL_SERVER_ERROR
from tinylinks.dao.redis import KeyValueRedisDAO
from tinylinks.services import ShortenerBaseService, ShortLinkService
from tinylinks.types import LambdaEvent, LambdaContext, LambdaResponse
from tinylinks.utils import load_config, require_environment


logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}


@require_environment(ENV.Redis.ADDR)
def short_link_service() -> ShortenerBaseService:
    """Build the Redis-backed shortening service from environment configuration

    Raises:
        MissingEnvironmentVariableError:
            If TINYURL_APP_REDIS_ADDR is not set.
        BadConfigurationError:
            If any configuration variable holds an invalid value.
        DataStoreError:
            If Redis is unreachable.
    """
    app_config = load_config()
    redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    dao = KeyValueRedisDAO(**redis_config, prefix=app_config['prefix'])
    return ShortLinkService(dao=dao)


def json_body(event: LambdaEvent) -> dict[str, Any]:
    """Parse the JSON body of an API Gateway event

    Raises:
        ValueError:
            If the body is not a JSON object.
    """
    try:
        body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError as e:
        raise ValueError('invalid JSON body') from e
    if not isinstance(body, dict):
        raise ValueError('JSON body must be an object')
    return body


def response(status_code: int, body: Any, headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_200(body: dict[str, Any]) -> LambdaResponse:
    return response(200, body)


def response_201(body: dict[str, Any]) -> LambdaResponse:
    return response(201, body)


def response_307(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 307,
        'headers': {'Location': location},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return response(400, body)


def response_404(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Not Found'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return response(404, body)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return response(500, body)


def guarantee_500_response(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: respond with 500 whenever the handler raises

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            logger.exception(
                'Unhandled exception in handler. Responding with 500.',
                extra={'handler': handler.__module__, 'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
