"""
Digest functions used by the "hash" redaction action.

Both functions render a value as "[HASH:xxxxxxxx]" (8 lowercase hex digits).
The default rolling hash is NOT a security primitive, only deterministic
obfuscation: equal values produce equal digests within and across traces.
"sha256" swaps in a cryptographic digest under the same output format; at
8 hex digits it is still not suitable for anonymizing low-entropy values.
"""
import hashlib
import json
import struct
from typing import Any, Callable, Dict

from trace_redaction.core.types import HashFunction

HASH_PREFIX = "[HASH:"
HASH_SUFFIX = "]"


def value_to_hash_input(value: Any) -> str:
    """Strings hash as-is; anything else hashes its compact JSON form."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def rolling_hash(value: Any) -> str:
    text = value_to_hash_input(value)
    acc = 0
    # Iterate UTF-16 code units so non-BMP characters contribute two units each.
    for (unit,) in struct.iter_unpack("<H", text.encode("utf-16-le")):
        acc = ((acc << 5) - acc + unit) & 0xFFFFFFFF
    if acc & 0x80000000:
        acc -= 0x100000000
    return f"{HASH_PREFIX}{abs(acc):08x}{HASH_SUFFIX}"


def sha256_hash(value: Any) -> str:
    digest = hashlib.sha256(value_to_hash_input(value).encode("utf-8")).hexdigest()
    return f"{HASH_PREFIX}{digest[:8]}{HASH_SUFFIX}"


HASH_FUNCTIONS: Dict[HashFunction, Callable[[Any], str]] = {
    "rolling": rolling_hash,
    "sha256": sha256_hash,
}
