"""
HMAC-SHA1 request signing.

Computes ``Base64(HMAC-SHA1(secret_key, canonical_string))`` as used by the
legacy AWS query and S3 REST authentication schemes. Building the canonical
string is left to the caller.
"""

import base64
import hmac
import logging
from typing import Union
from urllib.parse import quote_plus

from .exceptions import SigningError

logger = logging.getLogger("lssig.signer")

# HMAC/SHA1 per RFC 2104
HMAC_SHA1_ALGORITHM = 'sha1'

Text = Union[str, bytes]


def _to_bytes(value: Text) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode('utf-8')


def form_urlencode(value: str) -> str:
    """
    Encode ``value`` the way ``application/x-www-form-urlencoded`` does.

    Spaces become ``+`` and everything outside ``[A-Za-z0-9*_.-]`` is
    percent-encoded from its UTF-8 bytes, so a base64 ``+`` turns into ``%2B``.
    This matches Java's ``URLEncoder``: ``*`` is left alone and ``~`` is encoded.
    """
    return quote_plus(value, safe='*', encoding='utf-8').replace('~', '%7E')


def sign(secret_key: Text, canonical_string: Text, url_encode: bool = False) -> str:
    """
    Calculate the RFC 2104 HMAC-SHA1 of a string.

    :param secret_key: The secret access key to sign with. ``str`` keys are
        UTF-8 encoded.
    :param canonical_string: The data to sign.
    :param url_encode: Form-encode the base64 signature before returning it.
    :return: The base64-encoded signature.
    :raises SigningError: If the SHA-1 HMAC cannot be constructed.
    """
    try:
        mac = hmac.new(_to_bytes(secret_key), digestmod=HMAC_SHA1_ALGORITHM)
    except ValueError as exc:
        # hashlib rejects unknown or disabled digests with ValueError
        logger.error("Could not initialize %s HMAC: %s", HMAC_SHA1_ALGORITHM, exc)
        raise SigningError(f"Could not find the {HMAC_SHA1_ALGORITHM} algorithm") from exc

    mac.update(_to_bytes(canonical_string))
    signature = base64.b64encode(mac.digest()).decode('ascii')

    if url_encode:
        return form_urlencode(signature)
    return signature
