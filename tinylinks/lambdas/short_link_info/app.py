import logging

from tinylinks.constants import DATA_STORE_UNAVAILABLE, MISSING_SHORT_LINK, SHORT_LINK_NOT_FOUND, INFO_SUCCESS
from tinylinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from tinylinks.lambdas.helpers import (
    guarantee_500_response,
    response_200,
    response_400,
    response_404,
    response_500,
    short_link_service,
)
from tinylinks.types import LambdaEvent, LambdaContext, LambdaResponse


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests for short link details (GET /api/info?shortLink=<code>)

    HTTP responses:
        200: Detail document
            url, created_at, expiration_in_minutes
        400: Bad client request
            message: missing 'shortLink' query parameter
        404: Not found
            message: short link never existed or has expired
        500: Internal server error
            message: data store unavailable or unexpected error

    Example:
        >>> event = {'queryStringParameters': {'shortLink': '1'}}
        >>> json.loads(lambda_handler(event, None)['body'])
        {'url': 'https://example.com', 'created_at': '2025-10-15T12:00:00+00:00', 'expiration_in_minutes': 60}
    """
    shortcode = (event.get('queryStringParameters') or {}).get('shortLink')
    if not shortcode:
        logger.info('Missing "shortLink" query parameter. Responding with 400.', extra={'event': MISSING_SHORT_LINK})
        return response_400(message="missing 'shortLink' query parameter", error_code=MISSING_SHORT_LINK)

    try:
        detail = short_link_service().short_link_info(shortcode)
    except ShortLinkNotFoundError:
        logger.info('Short link not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_LINK_NOT_FOUND})
        return response_404(message=f"short link '{shortcode}' doesn't exist", error_code=SHORT_LINK_NOT_FOUND)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500(message='data store unavailable', error_code=DATA_STORE_UNAVAILABLE)

    logger.info('Found short link detail. Responding with 200.', extra={'shortcode': shortcode, 'event': INFO_SUCCESS})
    return response_200(detail.to_dict())
