from strongbox_testing.shared.http_resource import (
    is_http_resource_available,
    is_resource_available,
    wait_for_http_resource,
)
from strongbox_testing.shared.utils import poll_until_success, wait_until

__all__ = [
    "is_http_resource_available",
    "is_resource_available",
    "poll_until_success",
    "wait_for_http_resource",
    "wait_until",
]
