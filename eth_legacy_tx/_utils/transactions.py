from eth_keys import (
    keys,
)
from eth_keys.datatypes import (
    PrivateKey,
)
from eth_keys.exceptions import (
    BadSignature,
)
from eth_typing import (
    ChecksumAddress,
    Hash32,
)
from eth_utils import (
    ValidationError,
    big_endian_to_int,
    decode_hex,
    encode_hex,
    get_extended_debug_logger,
    to_hex,
)

from eth_legacy_tx.abc import (
    FieldStoreAPI,
)
from eth_legacy_tx.constants import (
    EIP155_CHAIN_ID_OFFSET,
    V_OFFSET,
)
from eth_legacy_tx.exceptions import (
    EmptyTransactionHash,
    UnsignedTransaction,
)
from eth_legacy_tx.fields import (
    SIGNATURE_FIELDS,
    TransactionField,
)
from eth_legacy_tx.typing import (
    VRS,
    PrivateKeyLike,
)

from .encoding import (
    encode_transaction,
    get_chain_id,
    prepare_signing_fields,
    to_rlp_item,
)
from .hashing import (
    keccak_or_none,
)

logger = get_extended_debug_logger("eth_legacy_tx._utils.transactions")


def normalize_private_key(private_key: PrivateKeyLike) -> PrivateKey:
    if isinstance(private_key, PrivateKey):
        return private_key
    elif isinstance(private_key, (bytes, bytearray)):
        return keys.PrivateKey(bytes(private_key))
    elif isinstance(private_key, str):
        return keys.PrivateKey(decode_hex(private_key))
    else:
        raise ValidationError(
            f"Private key must be bytes, hex text or a PrivateKey.  Got: {type(private_key)}"
        )


def field_to_int(value: object, title: str = "Value") -> int:
    item = to_rlp_item(value)
    if not isinstance(item, bytes):
        raise ValidationError(f"{title} must be a scalar.  Got: {value!r}")
    return big_endian_to_int(item)


def create_transaction_v(recovery_id: int, chain_id: int) -> int:
    """
    Fold the chain id into the recovery id: ``recovery_id + 35 + chain_id * 2``.
    Without a chain id the chain term is dropped but the offset stays 35.
    """
    v = recovery_id + EIP155_CHAIN_ID_OFFSET
    if chain_id > 0:
        v += chain_id * 2
    return v


def extract_recovery_id(v: int, chain_id: int) -> int:
    if v in (V_OFFSET, V_OFFSET + 1):
        recovery_id = v - V_OFFSET
    elif chain_id > 0:
        recovery_id = v - EIP155_CHAIN_ID_OFFSET - chain_id * 2
    else:
        recovery_id = v - EIP155_CHAIN_ID_OFFSET

    if recovery_id not in (0, 1):
        raise ValidationError(
            f"Transaction v={v} is not a valid recovery value for chain id {chain_id}"
        )
    return recovery_id


def get_message_hash(fields: FieldStoreAPI) -> Hash32:
    """
    Hash the message for signing of ``fields`` without modifying them.
    """
    message_fields = fields.copy()
    prepare_signing_fields(message_fields)
    message_hash = keccak_or_none(encode_transaction(message_fields))
    if message_hash is None:
        raise EmptyTransactionHash("Transaction message for signing has no content")
    return message_hash


def create_transaction_signature(
    fields: FieldStoreAPI,
    private_key: PrivateKey,
) -> VRS:
    """
    Sign the message for signing of ``fields``.

    This leaves ``fields`` in the message-for-signing state: the EIP-155
    placeholders when a chain id is present, otherwise without ``v``, ``r``
    and ``s``. That state persists if signing fails.
    """
    prepare_signing_fields(fields)
    message = encode_transaction(fields)

    message_hash = keccak_or_none(message)
    if message_hash is None:
        raise EmptyTransactionHash("Refusing to sign a transaction with no content")

    logger.debug2("Signing transaction message hash %s", encode_hex(message_hash))
    signature = private_key.sign_msg_hash(message_hash)

    recovery_id, r, s = signature.vrs
    v = create_transaction_v(recovery_id, get_chain_id(fields))

    return v, r, s


def sign_transaction_fields(fields: FieldStoreAPI, private_key: PrivateKey) -> bytes:
    """
    Sign ``fields`` in place and return the encoding of the signed transaction.
    """
    v, r, s = create_transaction_signature(fields, private_key)

    fields.set(TransactionField.R, to_hex(r))
    fields.set(TransactionField.S, to_hex(s))
    fields.set(TransactionField.V, v)
    logger.debug2("Stored transaction signature v=%d r=%s s=%s", v, to_hex(r), to_hex(s))

    return encode_transaction(fields)


def get_transaction_vrs(fields: FieldStoreAPI) -> VRS:
    missing = [field.name.lower() for field in SIGNATURE_FIELDS if not fields.has(field)]
    if missing:
        raise UnsignedTransaction(
            f"Transaction is missing signature fields: {', '.join(missing)}"
        )
    v, r, s = (
        field_to_int(fields.get(field), title=f"Transaction.{field.name.lower()}")
        for field in SIGNATURE_FIELDS
    )
    return v, r, s


def extract_transaction_sender(fields: FieldStoreAPI) -> ChecksumAddress:
    v, r, s = get_transaction_vrs(fields)
    recovery_id = extract_recovery_id(v, get_chain_id(fields))
    message_hash = get_message_hash(fields)

    try:
        signature = keys.Signature(vrs=(recovery_id, r, s))
        public_key = signature.recover_public_key_from_msg_hash(message_hash)
    except BadSignature as e:
        raise ValidationError(f"Bad Signature: {str(e)}")

    return public_key.to_checksum_address()
