from typing import (
    Any,
    Sequence,
    Tuple,
    Union,
)

from eth_keys.datatypes import (
    PrivateKey,
)

# Anything a field slot accepts. Nested sequences are encoded as RLP lists.
FieldValue = Union[int, bytes, bytearray, str, Sequence[Any]]

RLPItem = Union[bytes, Sequence[Any]]

PrivateKeyLike = Union[PrivateKey, bytes, str]

VRS = Tuple[int, int, int]
