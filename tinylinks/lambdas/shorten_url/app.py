import logging

from tinylinks.constants import DATA_STORE_UNAVAILABLE, INVALID_REQUEST_BODY, SHORTEN_SUCCESS
from tinylinks.exceptions import InvalidInputError
from tinylinks.dao.exceptions import DataStoreError
from tinylinks.lambdas.helpers import (
    guarantee_500_response,
    json_body,
    response_201,
    response_400,
    response_500,
    short_link_service,
)
from tinylinks.types import LambdaEvent, LambdaContext, LambdaResponse


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs (POST /api/shorten)

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract URL and expiration from request body
    - Step 2: Shorten the URL (reusing a live short link for the same URL)
    - Step 3: Respond to user with 201 created

    HTTP responses:
        201: Successful URL shortening
            short_link: the short code
        400: Bad client request
            message: invalid JSON, missing 'url', malformed URL or bad 'expiration_in_minutes'
        500: Internal server error
            message: data store unavailable or unexpected error

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format, with a JSON body
            {"url": str, "expiration_in_minutes": int}.
        context (LambdaContext):
            AWS Lambda context object (not used directly).

    Returns:
        LambdaResponse: API Gateway-compatible response.

    Example:
        >>> event = {'body': '{"url": "https://example.com", "expiration_in_minutes": 60}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])
        {'short_link': '1'}
    """
    # 1- Extract URL and expiration from request body
    try:
        body = json_body(event)
    except ValueError as e:
        logger.info('Unparsable request body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message=str(e), error_code=INVALID_REQUEST_BODY)

    url = body.get('url')
    if not url or not isinstance(url, str):
        logger.info('Missing "url" in request body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message="missing 'url' in JSON body", error_code=INVALID_REQUEST_BODY)

    expiration_in_minutes = body.get('expiration_in_minutes', 0)
    if isinstance(expiration_in_minutes, bool) or not isinstance(expiration_in_minutes, int) or expiration_in_minutes < 0:
        logger.info('Invalid "expiration_in_minutes" in request body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message="'expiration_in_minutes' must be a non-negative integer", error_code=INVALID_REQUEST_BODY)

    # 2- Shorten the URL
    try:
        shortcode = short_link_service().shorten(url, expiration_in_minutes)
    except InvalidInputError as e:
        logger.info('Invalid URL. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message=str(e), error_code=INVALID_REQUEST_BODY)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500(message='data store unavailable', error_code=DATA_STORE_UNAVAILABLE)

    # 3- Respond with the short link
    logger.info('Shortened URL. Responding with 201.', extra={'shortcode': shortcode, 'event': SHORTEN_SUCCESS})
    return response_201({'short_link': shortcode})
