import logging

from tinylinks.constants import (
    SHORT_LINK_PATTERN,
    DATA_STORE_UNAVAILABLE,
    MISSING_SHORT_LINK,
    INVALID_SHORT_LINK,
    SHORT_LINK_NOT_FOUND,
    REDIRECT_SUCCESS,
)
from tinylinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from tinylinks.lambdas.helpers import (
    guarantee_500_response,
    response_307,
    response_400,
    response_404,
    response_500,
    short_link_service,
)
from tinylinks.types import LambdaEvent, LambdaContext, LambdaResponse


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short links (GET /{shortLink})

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract short link from request path
    - Step 2: Resolve the short link to its original URL
    - Step 3: Redirect client to the original URL

    HTTP responses:
        307: Successful redirect
            headers:
                Location: original URL
        400: Bad client request
            message: missing short link, or one not matching [a-zA-Z0-9]{1,11}
        404: Not found
            message: short link never existed or has expired
        500: Internal server error
            message: data store unavailable or unexpected error

    Example:
        >>> event = {'pathParameters': {'shortLink': '1'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        307
        >>> response['headers']['Location']
        'https://example.com'
    """
    # 1- Extract short link from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortLink')
    if shortcode is None:
        logger.info('Missing "shortLink" in path. Responding with 400.', extra={'event': MISSING_SHORT_LINK})
        return response_400(message="missing 'shortLink' in path", error_code=MISSING_SHORT_LINK)
    if not SHORT_LINK_PATTERN.fullmatch(shortcode):
        logger.info('Malformed short link. Responding with 400.', extra={'shortcode': shortcode, 'event': INVALID_SHORT_LINK})
        return response_400(message=f"invalid short link '{shortcode}'", error_code=INVALID_SHORT_LINK)

    # 2- Resolve the short link
    try:
        target_url = short_link_service().unshorten(shortcode)
    except ShortLinkNotFoundError:
        logger.info('Short link not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_LINK_NOT_FOUND})
        return response_404(message=f"short link '{shortcode}' doesn't exist", error_code=SHORT_LINK_NOT_FOUND)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500(message='data store unavailable', error_code=DATA_STORE_UNAVAILABLE)

    # 3- Redirect client to target URL
    logger.info('Redirecting client to target URL. Responding with 307.', extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS})
    return response_307(location=target_url)
