"""Pluggable digest functions.

A HashFunc takes the raw bytes to hash and returns a lowercase hex digest.
The process-wide selection defaults to SHA-1; swap it once at startup:

    from signature import hash_func
    hash_func.set_hash_func(hash_func.md5_hash)

or pass a function explicitly to hash_with_keys / Signer instead.
"""

import hashlib
import logging
from typing import Callable, Dict, List, Union

logger = logging.getLogger(__name__)

HashInput = Union[bytes, bytearray, memoryview, str]
HashFunc = Callable[[bytes], str]


class UnsupportedAlgorithmError(ValueError):
    """Raised when a hash algorithm name is not registered."""


def _as_bytes(data: HashInput) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def sha1_hash(data: HashInput) -> str:
    """SHA-1 as defined in RFC 3174."""
    return hashlib.sha1(_as_bytes(data)).hexdigest()


def md5_hash(data: HashInput) -> str:
    """MD5 as defined in RFC 1321."""
    return hashlib.md5(_as_bytes(data)).hexdigest()


def sha256_hash(data: HashInput) -> str:
    """SHA-256 as defined in FIPS 180-4."""
    return hashlib.sha256(_as_bytes(data)).hexdigest()


HASH_FUNCS: Dict[str, HashFunc] = {
    "sha1": sha1_hash,
    "md5": md5_hash,
    "sha256": sha256_hash,
}

_current: HashFunc = sha1_hash


def get_hash_func() -> HashFunc:
    return _current


def set_hash_func(func: HashFunc) -> None:
    """Replace the process-wide digest function.

    Not synchronized: set it before hashing starts on other threads.
    """
    global _current
    if not callable(func):
        raise TypeError(f"hash function must be callable, got {type(func).__name__}")
    logger.debug("Selected hash function %s", getattr(func, "__name__", repr(func)))
    _current = func


def hash_data(data: HashInput) -> str:
    """Hash data with the currently selected function."""
    return _current(_as_bytes(data))


def available_algorithms() -> List[str]:
    return sorted(HASH_FUNCS)


def get_hash_func_by_name(name: str) -> HashFunc:
    # "SHA-1", "sha_256" and "Md5" all resolve
    key = (name or "").strip().lower().replace("-", "").replace("_", "")
    try:
        return HASH_FUNCS[key]
    except KeyError:
        raise UnsupportedAlgorithmError(
            f"Unsupported hash algorithm: {name!r} (available: {', '.join(available_algorithms())})"
        ) from None


def configure_from_env() -> HashFunc:
    """Select the algorithm named by SIGNATURE_HASH_ALGORITHM and return it."""
    from .config import HASH_ALGORITHM

    func = get_hash_func_by_name(HASH_ALGORITHM)
    set_hash_func(func)
    return func
