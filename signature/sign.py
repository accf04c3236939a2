from dataclasses import dataclass, field
from typing import Optional

from . import hash_func as _hash_func
from .hash_func import HashFunc, HashInput

KEY_SEPARATOR = b":"


def merge_bytes(*parts: HashInput) -> bytes:
    """Concatenate byte sequences in order; str parts are UTF-8 encoded."""
    chunks = []
    for part in parts:
        if isinstance(part, str):
            chunks.append(part.encode("utf-8"))
        elif isinstance(part, (bytes, bytearray, memoryview)):
            chunks.append(bytes(part))
        else:
            raise TypeError(f"expected bytes-like or str, got {type(part).__name__}")
    return b"".join(chunks)


def hash_with_keys(
    body: HashInput,
    public_key: HashInput,
    private_key: HashInput,
    hash_func: Optional[HashFunc] = None,
) -> str:
    """
    Hash body merged with the key pair: body + public_key + b":" + private_key.

    The merged bytes go to hash_func as-is, so binary bodies hash losslessly.
    When hash_func is None the process-wide selection is used.
    Useful for signing non-URL payloads such as request or response bodies.
    """
    func = _hash_func.get_hash_func() if hash_func is None else hash_func
    return func(merge_bytes(body, public_key, KEY_SEPARATOR, private_key))


@dataclass(frozen=True)
class Signer:
    public_key: HashInput
    private_key: HashInput = field(repr=False)
    hash_func: Optional[HashFunc] = None

    def sign(self, body: HashInput) -> str:
        return hash_with_keys(body, self.public_key, self.private_key, hash_func=self.hash_func)

    @classmethod
    def from_config(cls, hash_func: Optional[HashFunc] = None) -> "Signer":
        from .config import PUBLIC_KEY, PRIVATE_KEY, HASH_ALGORITHM

        func = _hash_func.get_hash_func_by_name(HASH_ALGORITHM) if hash_func is None else hash_func
        return cls(public_key=PUBLIC_KEY, private_key=PRIVATE_KEY, hash_func=func)
