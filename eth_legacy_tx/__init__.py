from importlib.metadata import (
    version as __version,
)

from eth_legacy_tx.exceptions import (
    EmptyTransactionHash,
    EthLegacyTxError,
    SigningError,
    UnsignedTransaction,
)
from eth_legacy_tx.fields import (
    FieldStore,
    TransactionField,
)
from eth_legacy_tx.transactions import (
    Transaction,
)

__version__ = __version("eth-legacy-tx")
