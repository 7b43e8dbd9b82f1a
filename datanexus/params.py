"""Serializer for the dataset parameter blob carried by SetDataParams.

The codec treats params as opaque bytes. These helpers produce the layout the
DataNexus program reads today: a variant tag followed by that variant's
fields. Callers on a different program revision can skip this module and pass
their own bytes to the builder.
"""

from dataclasses import dataclass
from typing import Optional, Union

from borsh_construct import CStruct, Enum, U16, U64, U8
from solders.pubkey import Pubkey

from .errors import AmountOverflowError, InvalidLengthError, ShareLimitOverflowError
from .types import BytesLike, HASH_LEN, U64_MAX, require_int

U16_MAX = 2**16 - 1

ParamsLayout = Enum(
    "Init"
    / CStruct(
        "key" / U8[HASH_LEN],
        "value" / U64,
        "share_limit" / U16,
        "reference_data" / U8[HASH_LEN],
    ),
    "Key" / CStruct("key" / U8[HASH_LEN]),
    "Value" / CStruct("value" / U64),
    "ShareLimit" / CStruct("share_limit" / U16),
    "ReferenceData" / CStruct("reference_data" / U8[HASH_LEN]),
    enum_name="Params",
)


def _key_bytes(value: Union[Pubkey, BytesLike], what: str) -> bytes:
    raw = bytes(value)
    if len(raw) != HASH_LEN:
        raise InvalidLengthError(what, HASH_LEN, len(raw))
    return raw


def _check_value(value: int) -> int:
    value = require_int(value, "params value")
    if value < 0 or value > U64_MAX:
        raise AmountOverflowError(value)
    return value


def _check_share_limit(value: int) -> int:
    value = require_int(value, "share limit")
    if value < 0 or value > U16_MAX:
        raise ShareLimitOverflowError(value)
    return value


@dataclass(frozen=True)
class InitParams:
    """Full parameter set written when a dataset is first configured."""

    key: bytes
    value: int
    share_limit: int
    reference_data: Optional[Pubkey] = None

    def __post_init__(self):
        object.__setattr__(self, "key", _key_bytes(self.key, "params key"))
        object.__setattr__(self, "value", _check_value(self.value))
        object.__setattr__(self, "share_limit", _check_share_limit(self.share_limit))
        if self.reference_data is not None:
            _key_bytes(self.reference_data, "reference data")

    def to_enum(self):
        # absent reference data is written as a zeroed key, not as a borsh Option
        reference = bytes(HASH_LEN) if self.reference_data is None else _key_bytes(self.reference_data, "reference data")
        return ParamsLayout.enum.Init(
            key=list(self.key),
            value=self.value,
            share_limit=self.share_limit,
            reference_data=list(reference),
        )


@dataclass(frozen=True)
class KeyParam:
    key: bytes

    def __post_init__(self):
        object.__setattr__(self, "key", _key_bytes(self.key, "params key"))

    def to_enum(self):
        return ParamsLayout.enum.Key(key=list(self.key))


@dataclass(frozen=True)
class ValueParam:
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", _check_value(self.value))

    def to_enum(self):
        return ParamsLayout.enum.Value(value=self.value)


@dataclass(frozen=True)
class ShareLimitParam:
    share_limit: int

    def __post_init__(self):
        object.__setattr__(self, "share_limit", _check_share_limit(self.share_limit))

    def to_enum(self):
        return ParamsLayout.enum.ShareLimit(share_limit=self.share_limit)


@dataclass(frozen=True)
class ReferenceDataParam:
    reference_data: Pubkey

    def __post_init__(self):
        _key_bytes(self.reference_data, "reference data")

    def to_enum(self):
        return ParamsLayout.enum.ReferenceData(
            reference_data=list(_key_bytes(self.reference_data, "reference data"))
        )


DatasetParams = Union[InitParams, KeyParam, ValueParam, ShareLimitParam, ReferenceDataParam]


def encode_params(params: Union[DatasetParams, BytesLike]) -> bytes:
    if isinstance(params, (bytes, bytearray, memoryview)):
        return bytes(params)
    return ParamsLayout.build(params.to_enum())
