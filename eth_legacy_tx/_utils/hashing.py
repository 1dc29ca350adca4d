from typing import (
    Optional,
)

from eth_hash.auto import (
    keccak,
)
from eth_typing import (
    Hash32,
)

from eth_legacy_tx.constants import (
    SHA3_NULL_HASH,
)
from eth_legacy_tx.validation import (
    validate_is_bytes,
)


def keccak_or_none(value: bytes) -> Optional[Hash32]:
    """
    Return the Keccak-256 digest of ``value``, or ``None`` if it is the digest
    of the empty byte string.
    """
    validate_is_bytes(value, title="Value to hash")

    digest = Hash32(keccak(value))
    if digest == SHA3_NULL_HASH:
        return None
    return digest
