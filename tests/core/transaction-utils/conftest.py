import pytest

# from https://github.com/ethereum/tests/blob/c951a3c105d600ccd8f1c3fc87856b2bcca3df0a/BasicTests/txtest.json  # noqa: E501
LEGACY_TRANSACTION_FIXTURES = [
    {
        "key": "c85ef7d79691fe79573b1a7064c19c1a9819ebdbd1faaab1a8ec92344438aaf4",
        "nonce": 0,
        "gasPrice": 1000000000000,
        "gas": 10000,
        "to": "0x13978aee95f38490e9769c39b2773ed763d9cd5f",
        "value": 10000000000000000,
        "data": "",
        "unsigned": "0xe88085e8d4a510008227109413978aee95f38490e9769c39b2773ed763d9cd5f872386f26fc1000080",  # noqa: E501
    },
    {
        "key": "c87f65ff3f271bf5dc8643484f66b200109caffe4bf98c4cb393dc35740b28c0",
        "nonce": 0,
        "gasPrice": 1000000000000,
        "gas": 10000,
        "to": "",
        "value": 0,
        "data": "0x6025515b525b600a37f260003556601b596020356000355760015b525b54602052f260255860005b525b54602052f2",  # noqa: E501
        "unsigned": "0xf83c8085e8d4a510008227108080af6025515b525b600a37f260003556601b596020356000355760015b525b54602052f260255860005b525b54602052f2",  # noqa: E501
    },
]

EIP155_TRANSACTION_FIXTURES = [
    # from the eth-account documentation
    {
        "key": "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318",
        "sender": "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23",
        "chainId": 1,
        "nonce": 0,
        "gasPrice": 234567897654321,
        "gas": 2000000,
        "to": "0xF0109fC8DF283027b6285cc889F5aA624EaC1F55",
        "value": 1000000000,
        "data": "",
        "signed": "f86a8086d55698372431831e848094f0109fc8df283027b6285cc889f5aa624eac1f55843b9aca008025a009ebb6ca057a0535d6186462bc0b465b561c94a295bdb0621fc19208ab149a9ca0440ffd775ce91a833ab410777204d5341a6f9fa91216a6f3ee2c051fea6a0428",  # noqa: E501
    },
    # from https://eips.ethereum.org/EIPS/eip-155
    {
        "key": "0x4646464646464646464646464646464646464646464646464646464646464646",
        "sender": "0x9d8A62f656a8d1615C1294fd71e9CFb3E4855A4F",
        "chainId": 1,
        "nonce": 9,
        "gasPrice": 20 * 10**9,
        "gas": 21000,
        "to": "0x3535353535353535353535353535353535353535",
        "value": 10**18,
        "data": "",
        "signed": "f86c098504a817c800825208943535353535353535353535353535353535353535880de0b6b3a76400008025a028ef61340bd939bc2195fe537567866003e1a15d3c71ff63e1590620aa636276a067cbe9d8997f761aecb703304b3800ccf555c9f3dc64214b297fb1966a3b6d83",  # noqa: E501
    },
]


@pytest.fixture(params=range(len(LEGACY_TRANSACTION_FIXTURES)))
def legacy_txn_fixture(request):
    return LEGACY_TRANSACTION_FIXTURES[request.param]


@pytest.fixture(params=range(len(EIP155_TRANSACTION_FIXTURES)))
def eip155_txn_fixture(request):
    return EIP155_TRANSACTION_FIXTURES[request.param]
