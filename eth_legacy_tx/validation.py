from typing import (
    Union,
)

from eth_utils import (
    ValidationError,
)

from eth_legacy_tx.constants import (
    SECPK1_N,
    UINT_64_MAX,
    UINT_256_MAX,
)


def validate_is_bytes(value: bytes, title: str = "Value") -> None:
    if not isinstance(value, bytes):
        raise ValidationError(f"{title} must be a byte string.  Got: {type(value)}")


def validate_is_integer(value: Union[int, bool], title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be an integer.  Got: {type(value)}")


def validate_gte(value: int, minimum: int, title: str = "Value") -> None:
    if value < minimum:
        raise ValidationError(
            f"{title} {value} is not greater than or equal to {minimum}"
        )
    validate_is_integer(value, title=title)


def validate_lte(value: int, maximum: int, title: str = "Value") -> None:
    if value > maximum:
        raise ValidationError(f"{title} {value} is not less than or equal to {maximum}")
    validate_is_integer(value, title=title)


def validate_lt_secpk1n(value: int, title: str = "Value") -> None:
    if value >= SECPK1_N:
        raise ValidationError(
            f"{title} is not less than the secp256k1 curve order.  Got: {value}"
        )


def validate_canonical_address(value: bytes, title: str = "Value") -> None:
    if not isinstance(value, bytes) or not len(value) == 20:
        raise ValidationError(f"{title} {value!r} is not a valid canonical address")


def validate_uint64(value: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    validate_gte(value, 0, title=title)
    validate_lte(value, UINT_64_MAX, title=title)


def validate_uint256(value: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    validate_gte(value, 0, title=title)
    validate_lte(value, UINT_256_MAX, title=title)
