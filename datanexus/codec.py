"""Payload codec for DataNexus instructions.

A payload is the opcode byte followed by the operation's fields, each in its
canonical form. Nothing is length-prefixed, so the layout is fixed by the
opcode alone:

    InitUserAccount  0 | account_type u8
    InitDataAccount  1 | hash [u8; 32]
    SetDataParams    2 | hash [u8; 32] | params (opaque)
    PurchaseAccess   3 | hash [u8; 32] | amount u64 LE
    ShareAccess      4 | hash [u8; 32]

Decoding belongs to the program; this module only encodes.
"""

from typing import Sequence, Union

from borsh_construct import U8, U64

from .types import AccountType, Amount, BytesLike, ContentHash, HASH_LEN, Opcode

HashLayout = U8[HASH_LEN]

Field = Union[AccountType, ContentHash, Amount, bytes, bytearray, memoryview]


def encode_field(field: Field) -> bytes:
    if isinstance(field, AccountType):
        return U8.build(int(field))
    if isinstance(field, ContentHash):
        return HashLayout.build(list(field.digest))
    if isinstance(field, Amount):
        return U64.build(field.value)
    if isinstance(field, (bytes, bytearray, memoryview)):
        # pre-serialized params, passed through untouched
        return bytes(field)
    raise TypeError(f"Unsupported payload field {type(field).__name__}")


def encode(opcode: Opcode, fields: Sequence[Field]) -> bytes:
    return U8.build(int(opcode)) + b"".join(encode_field(f) for f in fields)


def encode_init_user_account(account_type: Union[AccountType, int, str]) -> bytes:
    return encode(Opcode.InitUserAccount, (AccountType.parse(account_type),))


def encode_init_data_account(content_hash: Union[ContentHash, BytesLike, str]) -> bytes:
    return encode(Opcode.InitDataAccount, (ContentHash.coerce(content_hash),))


def encode_set_data_params(content_hash: Union[ContentHash, BytesLike, str], params: BytesLike) -> bytes:
    return encode(Opcode.SetDataParams, (ContentHash.coerce(content_hash), bytes(params)))


def encode_purchase_access(content_hash: Union[ContentHash, BytesLike, str], amount: Union[Amount, int]) -> bytes:
    return encode(Opcode.PurchaseAccess, (ContentHash.coerce(content_hash), Amount.coerce(amount)))


def encode_share_access(content_hash: Union[ContentHash, BytesLike, str]) -> bytes:
    return encode(Opcode.ShareAccess, (ContentHash.coerce(content_hash),))
