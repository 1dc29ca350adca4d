from eth_keys import (
    keys,
)
from eth_utils import (
    decode_hex,
    setup_DEBUG2_logging,
)
import pytest

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


# from the eth-account documentation
ACCOUNT_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
ACCOUNT_ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"


@pytest.fixture
def private_key():
    return keys.PrivateKey(decode_hex(ACCOUNT_PRIVATE_KEY))


@pytest.fixture
def account_address():
    return ACCOUNT_ADDRESS
