from typing import (
    List,
    Optional,
)

from eth_utils import (
    ValidationError,
    big_endian_to_int,
    is_0x_prefixed,
    to_bytes,
)
import rlp
from rlp.sedes import (
    big_endian_int,
)

from eth_legacy_tx.abc import (
    FieldStoreAPI,
)
from eth_legacy_tx.constants import (
    SIGNED_FIELD_COUNT,
    UNSIGNED_FIELD_COUNT,
)
from eth_legacy_tx.fields import (
    SIGNATURE_FIELDS,
    TransactionField,
)
from eth_legacy_tx.typing import (
    FieldValue,
    RLPItem,
)


def to_rlp_item(value: Optional[FieldValue]) -> RLPItem:
    """
    Normalize a stored field value to something :func:`rlp.encode` accepts.

    Integers become their minimal big-endian representation (zero is the
    empty string), ``0x`` prefixed text is hex decoded, any other text is
    UTF-8 encoded and sequences are normalized item by item.
    """
    if value is None:
        return b""
    elif isinstance(value, bool):
        return big_endian_int.serialize(int(value))
    elif isinstance(value, int):
        if value < 0:
            raise ValidationError(f"Cannot encode negative integer: {value}")
        return big_endian_int.serialize(value)
    elif isinstance(value, (bytes, bytearray)):
        return bytes(value)
    elif isinstance(value, str):
        if is_0x_prefixed(value):
            return to_bytes(hexstr=value)
        return value.encode("utf-8")
    elif isinstance(value, (list, tuple)):
        return [to_rlp_item(item) for item in value]
    else:
        raise ValidationError(f"Cannot encode transaction field of type {type(value)}")


def get_chain_id(fields: FieldStoreAPI) -> int:
    """
    Return the chain id as an integer, or 0 when it is absent or does not
    select replay protection.
    """
    chain_id = fields.get(TransactionField.CHAIN_ID)
    if chain_id is None:
        return 0
    elif isinstance(chain_id, int):
        chain_id = int(chain_id)
    elif isinstance(chain_id, str) and is_0x_prefixed(chain_id):
        chain_id = big_endian_to_int(to_bytes(hexstr=chain_id))
    elif isinstance(chain_id, (bytes, bytearray)):
        chain_id = big_endian_to_int(bytes(chain_id))
    else:
        try:
            chain_id = int(chain_id)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(f"Transaction chain id is not numeric: {chain_id!r}") from e
    return max(chain_id, 0)


def is_eip155_shaped(fields: FieldStoreAPI) -> bool:
    return get_chain_id(fields) > 0


def has_signature_fields(fields: FieldStoreAPI) -> bool:
    return any(fields.has(field) for field in SIGNATURE_FIELDS)


def get_field_count(fields: FieldStoreAPI) -> int:
    if is_eip155_shaped(fields) or has_signature_fields(fields):
        return SIGNED_FIELD_COUNT
    else:
        return UNSIGNED_FIELD_COUNT


def build_rlp_items(fields: FieldStoreAPI) -> List[RLPItem]:
    """
    Project the stored fields onto the ordered list which gets RLP encoded.

    The list holds the six unsigned fields, or all nine when the transaction
    carries a chain id or a signature. Absent fields are empty strings. With
    a chain id and no ``v`` the ``v`` slot holds the chain id, as required for
    the EIP-155 message for signing.
    """
    field_count = get_field_count(fields)
    items: List[RLPItem] = [b""] * field_count

    for slot, value in fields.serialized_items():
        if slot < field_count:
            items[slot] = to_rlp_item(value)

    chain_id = get_chain_id(fields)
    if chain_id > 0 and not fields.has(TransactionField.V):
        items[TransactionField.V] = to_rlp_item(chain_id)

    return items


def encode_transaction(fields: FieldStoreAPI) -> bytes:
    return rlp.encode(build_rlp_items(fields))


def apply_eip155_signing_fields(fields: FieldStoreAPI) -> None:
    """
    Overwrite the signature fields with the EIP-155 placeholders
    ``v = chain_id, r = 0, s = 0``.
    """
    chain_id = get_chain_id(fields)
    if chain_id <= 0:
        raise ValidationError(
            f"EIP-155 signing fields require a positive chain id.  Got: {chain_id}"
        )
    fields.set(TransactionField.V, chain_id)
    fields.set(TransactionField.R, 0)
    fields.set(TransactionField.S, 0)


def prepare_signing_fields(fields: FieldStoreAPI) -> None:
    """
    Put the signature fields into the state whose encoding is the message for
    signing: the EIP-155 placeholders with a chain id, absent without one.
    """
    if is_eip155_shaped(fields):
        apply_eip155_signing_fields(fields)
    else:
        for field in SIGNATURE_FIELDS:
            fields.clear(field)
