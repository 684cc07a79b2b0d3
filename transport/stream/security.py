"""
Stream Chat Webhook Signature Verification

SECURITY BOUNDARY - Verify Stream HMAC signature.
No command imports. No retries. No logic.
"""

import hashlib
import hmac
import logging
from typing import Optional

from fastapi import Request

from config import StreamConfig

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-signature"


class SignatureVerificationError(Exception):
    """Signature verification failed."""
    pass


def verify_webhook(body: bytes, signature: Optional[str], api_secret: str) -> bool:
    """
    Check a Stream webhook signature.

    Stream signs the raw request body with HMAC-SHA256 keyed by the
    API secret and sends the hex digest in the X-Signature header.

    Args:
        body: Raw request body bytes (before JSON decoding)
        signature: Value of the X-Signature header, if any
        api_secret: Stream API secret

    Returns:
        True if the signature matches
    """

    if not signature or not api_secret:
        return False

    expected_signature = hmac.new(
        key=api_secret.encode("utf-8"),
        msg=body,
        digestmod=hashlib.sha256
    ).hexdigest()

    # Compare (constant-time to prevent timing attacks)
    return hmac.compare_digest(signature.encode("utf-8"), expected_signature.encode("utf-8"))


async def verify_signature(
    request: Request,
    body: bytes,
    config: StreamConfig,
) -> None:
    """
    Gate a request on its Stream signature.

    Raises:
        SignatureVerificationError: Missing or invalid signature

    Args:
        request: FastAPI Request object
        body: Raw request body bytes
        config: Configuration holding the API secret

    Returns:
        None (raises if invalid)
    """

    signature = request.headers.get(SIGNATURE_HEADER)
    if not signature:
        raise SignatureVerificationError(f"Missing {SIGNATURE_HEADER} header")

    if not config.api_secret:
        logger.error("STREAM_API_SECRET not configured, rejecting webhook")
        raise SignatureVerificationError("STREAM_API_SECRET not configured")

    if not verify_webhook(body, signature, config.api_secret):
        raise SignatureVerificationError("Invalid signature")
