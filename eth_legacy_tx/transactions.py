from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
    Type,
)

from eth_typing import (
    ChecksumAddress,
    Hash32,
    HexStr,
)
from eth_utils import (
    ExtendedDebugLogger,
    encode_hex,
    get_extended_debug_logger,
    remove_0x_prefix,
)

from eth_legacy_tx._utils.encoding import (
    encode_transaction,
    get_chain_id,
    to_rlp_item,
)
from eth_legacy_tx._utils.hashing import (
    keccak_or_none,
)
from eth_legacy_tx._utils.transactions import (
    extract_recovery_id,
    extract_transaction_sender,
    field_to_int,
    get_message_hash,
    get_transaction_vrs,
    normalize_private_key,
    sign_transaction_fields,
)
from eth_legacy_tx.abc import (
    FieldKey,
    FieldStoreAPI,
    TransactionAPI,
)
from eth_legacy_tx.constants import (
    CREATE_CONTRACT_ADDRESS,
)
from eth_legacy_tx.fields import (
    SIGNATURE_FIELDS,
    FieldStore,
    TransactionField,
)
from eth_legacy_tx.typing import (
    PrivateKeyLike,
)
from eth_legacy_tx.validation import (
    validate_canonical_address,
    validate_gte,
    validate_is_bytes,
    validate_lt_secpk1n,
    validate_uint64,
    validate_uint256,
)


class TransactionFieldProperty:
    """
    Read, write and delete access to a single transaction field.
    """

    def __init__(self, field: TransactionField) -> None:
        self.field = field

    def __get__(self, instance: Optional["Transaction"], owner: type) -> Any:
        if instance is None:
            return self
        return instance.fields.get(self.field)

    def __set__(self, instance: "Transaction", value: Any) -> None:
        instance.fields.set(self.field, value)

    def __delete__(self, instance: "Transaction") -> None:
        instance.fields.clear(self.field)


class Transaction(TransactionAPI):
    """
    A legacy (pre EIP-2718) transaction.

    The transaction is built from a mapping which may hold any of ``from``,
    ``chainId``, ``nonce``, ``gasPrice``, ``gasLimit`` (or ``gas``), ``to``,
    ``value``, ``data``, ``v``, ``r`` and ``s``. Other keys are ignored.

    With a positive ``chainId`` the transaction is serialized and signed as
    described in `EIP-155 <https://eips.ethereum.org/EIPS/eip-155>`_.
    """

    field_store_class: Type[FieldStoreAPI] = FieldStore

    from_ = TransactionFieldProperty(TransactionField.FROM)
    chain_id = TransactionFieldProperty(TransactionField.CHAIN_ID)
    nonce = TransactionFieldProperty(TransactionField.NONCE)
    gas_price = TransactionFieldProperty(TransactionField.GAS_PRICE)
    gas_limit = TransactionFieldProperty(TransactionField.GAS_LIMIT)
    gas = gas_limit
    to = TransactionFieldProperty(TransactionField.TO)
    value = TransactionFieldProperty(TransactionField.VALUE)
    data = TransactionFieldProperty(TransactionField.DATA)
    v = TransactionFieldProperty(TransactionField.V)
    r = TransactionFieldProperty(TransactionField.R)
    s = TransactionFieldProperty(TransactionField.S)

    def __init__(self, tx_data: Mapping[str, Any] = None) -> None:
        self._fields = self.get_field_store_class()(tx_data)

    @classmethod
    def get_field_store_class(cls) -> Type[FieldStoreAPI]:
        if cls.field_store_class is None:
            raise AttributeError("No `field_store_class` has been set for this Transaction")
        return cls.field_store_class

    #
    # Logging
    #
    @property
    def logger(self) -> ExtendedDebugLogger:
        return get_extended_debug_logger(
            f"eth_legacy_tx.transactions.{self.__class__.__name__}"
        )

    #
    # Field access
    #
    @property
    def fields(self) -> FieldStoreAPI:
        return self._fields

    @property
    def tx_data(self) -> Dict[str, Any]:
        return self._fields.to_dict()

    def get(self, name: FieldKey) -> Any:
        return self._fields.get(name)

    def set(self, name: FieldKey, value: Any) -> None:
        self._fields.set(name, value)

    def __getitem__(self, name: FieldKey) -> Any:
        return self._fields.get(name)

    def __setitem__(self, name: FieldKey, value: Any) -> None:
        self._fields.set(name, value)

    def __delitem__(self, name: FieldKey) -> None:
        self._fields.clear(name)

    def __contains__(self, name: object) -> bool:
        return self._fields.has(name)

    #
    # Serialization
    #
    def serialize(self) -> bytes:
        return encode_transaction(self._fields)

    def hash(self) -> Optional[HexStr]:
        digest = keccak_or_none(self.serialize())
        if digest is None:
            return None
        return remove_0x_prefix(encode_hex(digest))

    #
    # Signing
    #
    def sign(self, private_key: PrivateKeyLike) -> HexStr:
        key = normalize_private_key(private_key)
        self.logger.debug2(
            "Signing transaction with chain id %d for %s",
            get_chain_id(self._fields),
            key.public_key.to_checksum_address(),
        )
        signed = sign_transaction_fields(self._fields, key)
        return remove_0x_prefix(encode_hex(signed))

    def get_message_hash(self) -> Hash32:
        return get_message_hash(self._fields)

    @property
    def is_signed(self) -> bool:
        if not all(self._fields.has(field) for field in SIGNATURE_FIELDS):
            return False
        _, r, s = get_transaction_vrs(self._fields)
        return r != 0 and s != 0

    @property
    def recovery_id(self) -> int:
        v, _, _ = get_transaction_vrs(self._fields)
        return extract_recovery_id(v, get_chain_id(self._fields))

    def get_sender(self) -> ChecksumAddress:
        return extract_transaction_sender(self._fields)

    #
    # Validation
    #
    def validate(self) -> None:
        fields = self._fields

        validate_uint64(
            field_to_int(fields.get(TransactionField.NONCE)),
            title="Transaction.nonce",
        )
        for field, title in (
            (TransactionField.GAS_PRICE, "Transaction.gas_price"),
            (TransactionField.GAS_LIMIT, "Transaction.gas_limit"),
            (TransactionField.VALUE, "Transaction.value"),
        ):
            validate_uint256(field_to_int(fields.get(field), title=title), title=title)

        to = to_rlp_item(fields.get(TransactionField.TO))
        if to != CREATE_CONTRACT_ADDRESS:
            validate_canonical_address(to, title="Transaction.to")
        validate_is_bytes(to_rlp_item(fields.get(TransactionField.DATA)), title="Transaction.data")

        if self.is_signed:
            v, r, s = get_transaction_vrs(fields)
            validate_uint256(v, title="Transaction.v")
            validate_uint256(r, title="Transaction.r")
            validate_uint256(s, title="Transaction.s")

            validate_lt_secpk1n(r, title="Transaction.r")
            validate_gte(r, minimum=1, title="Transaction.r")
            validate_lt_secpk1n(s, title="Transaction.s")
            validate_gte(s, minimum=1, title="Transaction.s")

            extract_recovery_id(v, get_chain_id(fields))

    def __str__(self) -> str:
        return self.hash() or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tx_data!r})"
