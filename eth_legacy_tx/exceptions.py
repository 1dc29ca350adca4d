class EthLegacyTxError(Exception):
    """
    Base class for all eth-legacy-tx errors.
    """


class SigningError(EthLegacyTxError):
    """
    Raised when a transaction cannot be signed.
    """


class EmptyTransactionHash(SigningError):
    """
    Raised when the message for signing hashes to the Keccak-256 digest of the
    empty byte string. There is nothing meaningful to sign in that case.
    """


class UnsignedTransaction(EthLegacyTxError):
    """
    Raised when signature-dependent data is requested from a transaction that
    does not carry a complete ``v``, ``r``, ``s`` signature.
    """
