import logging
from typing import Optional, Dict, Any

import requests

from .config import (
    PUBLIC_KEY,
    PRIVATE_KEY,
    REQUEST_TIMEOUT,
    PUBLIC_KEY_HEADER,
    SIGNATURE_HEADER,
)
from .hash_func import HashFunc, HashInput
from .sign import hash_with_keys, merge_bytes

logger = logging.getLogger(__name__)


def signature_headers(
    body: HashInput,
    public_key: HashInput,
    private_key: HashInput,
    hash_func: Optional[HashFunc] = None,
) -> Dict[str, str]:
    """Public key and signature headers for body.

    A bytes public key is sent latin-1 decoded, which maps every byte to one
    header character, so opaque non-UTF-8 keys survive the round trip.
    """
    if isinstance(public_key, str):
        public_key_text = public_key
    else:
        public_key_text = bytes(public_key).decode("latin-1")
    return {
        PUBLIC_KEY_HEADER: public_key_text,
        SIGNATURE_HEADER: hash_with_keys(body, public_key, private_key, hash_func=hash_func),
    }


def signed_post_json(
    url: str,
    body: HashInput,
    *,
    public_key: Optional[HashInput] = None,
    private_key: Optional[HashInput] = None,
    hash_func: Optional[HashFunc] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Optional[Dict[str, Any]]:
    """POST body to url with signature headers and return the decoded JSON, or None on failure."""
    payload = merge_bytes(body)
    pk = PUBLIC_KEY if public_key is None else public_key
    sk = PRIVATE_KEY if private_key is None else private_key
    request_timeout = REQUEST_TIMEOUT if timeout is None else timeout

    all_headers: Dict[str, str] = dict(headers or {})
    all_headers.update(signature_headers(payload, pk, sk, hash_func=hash_func))

    try:
        resp = requests.post(url, data=payload, headers=all_headers, timeout=request_timeout)
        resp.raise_for_status()
    except requests.Timeout:
        logger.error("Request to %s timed out after %ss", url, request_timeout)
        return None
    except requests.RequestException as exc:
        logger.error("Network error calling %s: %s", url, exc)
        return None
    try:
        return resp.json()
    except ValueError:
        logger.warning("Failed to parse JSON from response of %s", url)
        return None
