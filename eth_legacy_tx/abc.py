from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    Optional,
    Tuple,
    Type,
    Union,
)

from eth_typing import (
    ChecksumAddress,
    Hash32,
    HexStr,
)

from eth_legacy_tx.typing import (
    FieldValue,
    PrivateKeyLike,
)

if TYPE_CHECKING:
    from eth_legacy_tx.fields import TransactionField  # noqa: F401

FieldKey = Union[str, "TransactionField"]


class FieldStoreAPI(ABC):
    """
    A holder for the named fields of a legacy transaction, keyed to their
    canonical serialization slot.
    """

    @abstractmethod
    def set(self, name: FieldKey, value: Optional[FieldValue]) -> None:
        """
        Store ``value`` in the slot named by ``name``. Unrecognized names are
        ignored. Storing ``None`` clears the slot.
        """
        ...

    @abstractmethod
    def get(self, name: FieldKey) -> Any:
        """
        Return the value stored under ``name``, or ``None`` if the slot is
        empty or ``name`` is not recognized.
        """
        ...

    @abstractmethod
    def has(self, name: FieldKey) -> bool:
        """
        Return ``True`` if ``name`` is recognized and currently holds a value.
        """
        ...

    @abstractmethod
    def clear(self, name: FieldKey) -> None:
        """
        Remove the value stored under ``name``, if any.
        """
        ...

    @abstractmethod
    def serialized_items(self) -> Iterable[Tuple[int, Any]]:
        """
        Iterate over ``(slot, value)`` for the present fields which take part
        in serialization, in slot order.
        """
        ...

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Return the present fields keyed by their canonical name.
        """
        ...

    @abstractmethod
    def copy(self) -> "FieldStoreAPI":
        ...


class TransactionAPI(ABC):
    """
    A legacy transaction which can be serialized, hashed and signed.
    """

    field_store_class: Type[FieldStoreAPI] = None

    @property
    @abstractmethod
    def fields(self) -> FieldStoreAPI:
        """
        Return the underlying field store. Mutations are visible to the
        transaction.
        """
        ...

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Return the RLP encoding of the transaction in its current state.
        """
        ...

    @abstractmethod
    def hash(self) -> Optional[HexStr]:
        """
        Return the hex encoded Keccak-256 digest of :meth:`serialize`, or
        ``None`` if the encoding has no content.
        """
        ...

    @abstractmethod
    def sign(self, private_key: PrivateKeyLike) -> HexStr:
        """
        Sign the transaction with ``private_key``, store the signature in the
        ``v``, ``r`` and ``s`` fields, and return the hex encoded signed
        transaction.
        """
        ...

    @abstractmethod
    def get_message_hash(self) -> Hash32:
        """
        Return the digest that is signed, computed without touching the
        stored fields.
        """
        ...

    @abstractmethod
    def get_sender(self) -> ChecksumAddress:
        """
        Recover the address which produced the stored signature.
        """
        ...

    @abstractmethod
    def validate(self) -> None:
        """
        Raise :class:`eth_utils.ValidationError` if any stored field is out
        of range for a legacy transaction.
        """
        ...
