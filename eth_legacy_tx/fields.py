import enum
from typing import (
    Any,
    Dict,
    Iterable,
    Mapping,
    Optional,
    Tuple,
)

from eth_utils import (
    get_extended_debug_logger,
    to_tuple,
)

from eth_legacy_tx.abc import (
    FieldKey,
    FieldStoreAPI,
)
from eth_legacy_tx.typing import (
    FieldValue,
)


class TransactionField(enum.IntEnum):
    """
    The slots a legacy transaction can hold. Non-negative values are the
    position of the field in the serialized list, negative values are meta
    fields which are consulted while signing but never serialized.
    """

    CHAIN_ID = -2
    FROM = -1
    NONCE = 0
    GAS_PRICE = 1
    GAS_LIMIT = 2
    TO = 3
    VALUE = 4
    DATA = 5
    V = 6
    R = 7
    S = 8

    @property
    def is_serialized(self) -> bool:
        return self >= 0


FIELD_NAMES: Dict[str, TransactionField] = {
    "from": TransactionField.FROM,
    "chainId": TransactionField.CHAIN_ID,
    "nonce": TransactionField.NONCE,
    "gasPrice": TransactionField.GAS_PRICE,
    "gasLimit": TransactionField.GAS_LIMIT,
    "gas": TransactionField.GAS_LIMIT,
    "to": TransactionField.TO,
    "value": TransactionField.VALUE,
    "data": TransactionField.DATA,
    "v": TransactionField.V,
    "r": TransactionField.R,
    "s": TransactionField.S,
}

# "gasLimit" wins over its "gas" synonym
CANONICAL_FIELD_NAMES: Dict[TransactionField, str] = {
    field: name for name, field in reversed(list(FIELD_NAMES.items()))
}

SIGNATURE_FIELDS = (TransactionField.V, TransactionField.R, TransactionField.S)


def resolve_field(name: FieldKey) -> Optional[TransactionField]:
    """
    Map a field name (or a :class:`TransactionField`) to its slot. Returns
    ``None`` for anything that is not one of the recognized names.
    """
    if isinstance(name, TransactionField):
        return name
    elif isinstance(name, str):
        return FIELD_NAMES.get(name)
    else:
        return None


class FieldStore(FieldStoreAPI):
    """
    Total, non-validating storage for transaction fields.

    A field which was never set is absent, which is distinct from a field
    holding an empty value such as ``b""`` or ``0``.
    """

    logger = get_extended_debug_logger("eth_legacy_tx.fields.FieldStore")

    def __init__(self, fields: Mapping[str, Any] = None) -> None:
        self._values: Dict[TransactionField, Any] = {}

        if fields is not None:
            for name, value in fields.items():
                self.set(name, value)

    def set(self, name: FieldKey, value: Optional[FieldValue]) -> None:
        field = resolve_field(name)
        if field is None:
            self.logger.debug2("Discarding unrecognized transaction field: %r", name)
        elif value is None:
            self._values.pop(field, None)
        else:
            self._values[field] = value

    def get(self, name: FieldKey) -> Any:
        field = resolve_field(name)
        if field is None:
            return None
        return self._values.get(field)

    def has(self, name: FieldKey) -> bool:
        field = resolve_field(name)
        return field is not None and field in self._values

    def clear(self, name: FieldKey) -> None:
        field = resolve_field(name)
        if field is not None:
            self._values.pop(field, None)

    @to_tuple
    def serialized_items(self) -> Iterable[Tuple[int, Any]]:
        for field in sorted(self._values):
            if field.is_serialized:
                yield int(field), self._values[field]

    def to_dict(self) -> Dict[str, Any]:
        return {
            CANONICAL_FIELD_NAMES[field]: value
            for field, value in sorted(self._values.items())
        }

    def copy(self) -> "FieldStore":
        duplicate = type(self)()
        duplicate._values = dict(self._values)
        return duplicate

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
