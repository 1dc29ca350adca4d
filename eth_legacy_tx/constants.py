from eth_typing import (
    Address,
    Hash32,
)

#
# Keccak-256 of the empty byte string
#
SHA3_NULL_HASH = Hash32(
    b"\xc5\xd2F\x01\x86\xf7#<\x92~}\xb2\xdc\xc7\x03\xc0"
    b"\xe5\x00\xb6S\xca\x82';{\xfa\xd8\x04]\x85\xa4p"
)


#
# Recovery value offsets
#
EIP155_CHAIN_ID_OFFSET = 35
# Offset used by transactions signed before chain ids existed
V_OFFSET = 27


#
# Serialization shapes
#
UNSIGNED_FIELD_COUNT = 6
SIGNED_FIELD_COUNT = 9


#
# Numeric bounds
#
UINT_64_MAX = 2**64 - 1
UINT_256_MAX = 2**256 - 1
SECPK1_N = 115792089237316195423570985008687907852837564279074904382605163141518161494337


CREATE_CONTRACT_ADDRESS = Address(b"")
