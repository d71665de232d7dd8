import logging

import requests

from strongbox_testing.constants import (
    DEFAULT_TIMEOUT_MILLIS,
    HTTP_PROBE_SLEEP_MILLIS,
    HTTP_SUCCESS_STATUSES,
)
from strongbox_testing.shared.utils import poll_until_success

logger = logging.getLogger(__name__)


def is_resource_available(url: str) -> bool:
    """
    Send a single HEAD request to *url* and report whether it answered with a 2xx status.

    Connection errors, DNS failures and malformed URLs all count as "not available".
    """
    try:
        response = requests.head(url)
    except (requests.exceptions.RequestException, ValueError) as err:
        logger.debug("HEAD %s failed: %s", url, err)
        return False

    if response.status_code not in HTTP_SUCCESS_STATUSES:
        logger.debug("HEAD %s returned %d", url, response.status_code)
        return False
    return True


def is_http_resource_available(url: str, timeout_millis: int) -> bool:
    return poll_until_success(
        is_resource_available, url, timeout_millis, HTTP_PROBE_SLEEP_MILLIS
    )


def wait_for_http_resource(url: str, timeout_millis: int = DEFAULT_TIMEOUT_MILLIS):
    assert is_http_resource_available(
        url, timeout_millis
    ), f"{url} not available after {timeout_millis} ms"
