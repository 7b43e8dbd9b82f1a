"""Value types accepted by the DataNexus payload codec.

Every range and length check lives here, at construction time, so the codec
and the instruction builders never have to re-validate what they receive.
"""

import hashlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .errors import AmountOverflowError, DataNexusError, InvalidLengthError

HASH_LEN = 32
U64_MAX = 2**64 - 1

BytesLike = Union[bytes, bytearray, memoryview]


def require_int(value, what: str) -> int:
    # bool is an int subclass, but True is never a meaningful quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataNexusError(f"{what} must be an integer, got {type(value).__name__} {value!r}")
    return int(value)


class Opcode(IntEnum):
    InitUserAccount = 0
    InitDataAccount = 1
    SetDataParams = 2
    PurchaseAccess = 3
    ShareAccess = 4


class AccountType(IntEnum):
    Owner = 0
    Access = 1

    @classmethod
    def parse(cls, value: Union["AccountType", int, str]) -> "AccountType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            norm = value.strip().replace("_", "").lower()
            for member in cls:
                if member.name.lower() == norm:
                    return member
            raise DataNexusError(f"Unsupported account type {value}")
        try:
            return cls(value)
        except ValueError as exc:
            raise DataNexusError(f"Unsupported account type {value}") from exc


@dataclass(frozen=True)
class ContentHash:
    """32-byte digest addressing a dataset on chain."""

    digest: bytes

    def __post_init__(self):
        if isinstance(self.digest, str):
            raise DataNexusError("content hash must be bytes; use ContentHash.from_hex for hex text")
        raw = bytes(self.digest)
        if len(raw) != HASH_LEN:
            raise InvalidLengthError("content hash", HASH_LEN, len(raw))
        object.__setattr__(self, "digest", raw)

    def __bytes__(self) -> bytes:
        return self.digest

    def hex(self) -> str:
        return self.digest.hex()

    @classmethod
    def of(cls, data: BytesLike) -> "ContentHash":
        """Hash raw dataset contents with SHA-256."""
        return cls(hashlib.sha256(bytes(data)).digest())

    @classmethod
    def from_hex(cls, value: str) -> "ContentHash":
        try:
            raw = bytes.fromhex(value.strip().removeprefix("0x"))
        except ValueError as exc:
            raise DataNexusError(f"content hash is not valid hex: {exc}") from exc
        return cls(raw)

    @classmethod
    def from_segments(cls, *segments: BytesLike) -> "ContentHash":
        """Join a hash that was handed over as several buffers.

        The joined value must still be a single 32-byte digest; segments are
        never padded or truncated to get there.
        """
        return cls(b"".join(bytes(s) for s in segments))

    @classmethod
    def coerce(cls, value: Union["ContentHash", BytesLike, str]) -> "ContentHash":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        return cls(bytes(value))


@dataclass(frozen=True)
class Amount:
    """Unsigned 64-bit token amount in the mint's smallest unit."""

    value: int

    def __post_init__(self):
        value = require_int(self.value, "amount")
        if value < 0 or value > U64_MAX:
            raise AmountOverflowError(value)
        object.__setattr__(self, "value", value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def coerce(cls, value: Union["Amount", int]) -> "Amount":
        if isinstance(value, cls):
            return value
        return cls(value)
