"""Keyed request signing.

Modules:
- hash_func: builtin digest functions and the process-wide selection
- sign: keyed hash composer (body + public key + ":" + private key)
- http: signed POST requests
"""

from .hash_func import (
    HashFunc,
    UnsupportedAlgorithmError,
    HASH_FUNCS,
    sha1_hash,
    md5_hash,
    sha256_hash,
    get_hash_func,
    set_hash_func,
    hash_data,
    get_hash_func_by_name,
    available_algorithms,
    configure_from_env,
)
from .sign import KEY_SEPARATOR, merge_bytes, hash_with_keys, Signer
from .http import signature_headers, signed_post_json

__all__ = [
    "HashFunc",
    "UnsupportedAlgorithmError",
    "HASH_FUNCS",
    "sha1_hash",
    "md5_hash",
    "sha256_hash",
    "get_hash_func",
    "set_hash_func",
    "hash_data",
    "get_hash_func_by_name",
    "available_algorithms",
    "configure_from_env",
    "KEY_SEPARATOR",
    "merge_bytes",
    "hash_with_keys",
    "Signer",
    "signature_headers",
    "signed_post_json",
]
