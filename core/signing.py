"""
URL signing for the image service.

Thumbor authenticates a request by comparing the first path segment with an
HMAC-SHA1 of the remainder of the path. Without a key the segment is the
literal "unsafe" token.
"""

import base64
import hmac
from typing import Optional

from core.constants import ThumborConstants, UrlConstants


def compute_signature(security_key: str, payload: str) -> str:
    """
    Compute the URL-safe signature for a payload.

    Args:
        security_key: Shared secret configured on the image service
        payload: Operation path followed by image path

    Returns:
        Base64 of the raw HMAC-SHA1 digest with '+' -> '-' and '/' -> '_',
        padding preserved
    """
    digest = hmac.new(
        security_key.encode("utf-8"),
        payload.encode("utf-8"),
        ThumborConstants.SIGNATURE_DIGEST,
    ).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def get_secure_string(security_key: Optional[str], operation_path: str, image_path: str) -> str:
    """
    Get the signature segment for a URL.

    Args:
        security_key: Shared secret, or None for unsigned URLs
        operation_path: Rendered operation path (empty or slash-terminated)
        image_path: Image path without leading slash

    Returns:
        "unsafe" when no key is configured, otherwise the HMAC signature
    """
    if security_key is None:
        return UrlConstants.UNSAFE

    return compute_signature(security_key, operation_path + image_path)
