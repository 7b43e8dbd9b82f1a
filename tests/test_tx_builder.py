import base64

import pytest
from solders.instruction import Instruction

from datanexus.accounts import SYS_PROGRAM_ID, TOKEN_PROGRAM_ID
from datanexus.config import Settings
from datanexus.errors import ConfigurationError
from datanexus.params import ValueParam
from datanexus.tx_builder import (
    DataNexusInstructions,
    build_init_data_account_ix,
    build_init_user_account_ix,
    build_purchase_access_ix,
    build_set_data_params_ix,
    build_share_access_ix,
    instruction_to_dict,
)
from datanexus.types import AccountType, ContentHash

HASH = ContentHash(bytes(range(32)))


def _layout(ix: Instruction):
    return [(m.pubkey, m.is_signer, m.is_writable) for m in ix.accounts]


def test_init_user_account(program_id, key) -> None:
    ix = build_init_user_account_ix(program_id, key(1), key(2), key(3), AccountType.Access)
    assert ix.program_id == program_id
    assert bytes(ix.data) == b"\x00\x01"
    assert _layout(ix) == [
        (key(1), True, True),
        (key(2), False, True),
        (key(3), False, True),
        (SYS_PROGRAM_ID, False, False),
    ]


def test_init_data_account(program_id, key) -> None:
    ix = build_init_data_account_ix(program_id, key(1), key(2), key(3), HASH)
    assert bytes(ix.data) == b"\x01" + bytes(HASH)
    assert _layout(ix) == [
        (key(1), True, True),
        (key(2), False, True),
        (key(3), False, True),
        (SYS_PROGRAM_ID, False, False),
    ]


def test_set_data_params_with_raw_bytes(program_id, key) -> None:
    ix = build_set_data_params_ix(program_id, key(1), key(2), HASH, b"\x05\x06")
    assert bytes(ix.data) == b"\x02" + bytes(HASH) + b"\x05\x06"
    assert _layout(ix) == [(key(1), True, True), (key(2), False, True)]


def test_set_data_params_with_typed_params(program_id, key) -> None:
    ix = build_set_data_params_ix(program_id, key(1), key(2), HASH, ValueParam(9))
    assert bytes(ix.data) == b"\x02" + bytes(HASH) + b"\x02" + (9).to_bytes(8, "little")


def test_purchase_access(program_id, key) -> None:
    ix = build_purchase_access_ix(program_id, key(1), key(2), key(3), key(4), key(5), key(6), HASH, 1)
    assert bytes(ix.data) == b"\x03" + bytes(HASH) + b"\x01" + bytes(7)
    assert _layout(ix) == [
        (key(1), True, True),
        (key(2), False, True),
        (key(3), False, True),
        (key(4), False, True),
        (key(5), False, True),
        (key(6), False, False),
        (TOKEN_PROGRAM_ID, False, False),
    ]


def test_share_access(program_id, key) -> None:
    ix = build_share_access_ix(program_id, key(1), key(2), key(3), key(4), key(5), b"\xff" * 32)
    assert bytes(ix.data) == b"\x04" + b"\xff" * 32
    assert _layout(ix) == [
        (key(1), True, True),
        (key(2), False, True),
        (key(3), False, True),
        (key(4), False, True),
        (key(5), False, False),
    ]


def test_builders_are_deterministic(program_id, key) -> None:
    first = build_purchase_access_ix(program_id, key(1), key(2), key(3), key(4), key(5), key(6), HASH, 42)
    second = build_purchase_access_ix(program_id, key(1), key(2), key(3), key(4), key(5), key(6), HASH, 42)
    assert bytes(first.data) == bytes(second.data)
    assert _layout(first) == _layout(second)
    assert first == second


def test_bound_builders_match_functions(program_id, key) -> None:
    nexus = DataNexusInstructions(program_id)
    assert nexus.init_user_account(key(1), key(2), key(3), "owner") == build_init_user_account_ix(
        program_id, key(1), key(2), key(3), AccountType.Owner
    )
    assert nexus.share_access(key(1), key(2), key(3), key(4), key(5), HASH) == build_share_access_ix(
        program_id, key(1), key(2), key(3), key(4), key(5), HASH
    )
    assert nexus.purchase_access(key(1), key(2), key(3), key(4), key(5), key(6), HASH, 3).accounts[-1].pubkey == (
        TOKEN_PROGRAM_ID
    )


def test_from_settings(program_id, key) -> None:
    nexus = DataNexusInstructions.from_settings(Settings(program_id=str(program_id)))
    ix = nexus.set_data_params(key(1), key(2), HASH, b"")
    assert ix.program_id == program_id
    assert nexus.system_program == SYS_PROGRAM_ID


def test_from_settings_requires_program_id() -> None:
    with pytest.raises(ConfigurationError):
        DataNexusInstructions.from_settings(Settings())


def test_instruction_to_dict(program_id, key) -> None:
    ix = build_init_user_account_ix(program_id, key(1), key(2), key(3), AccountType.Owner)
    payload = instruction_to_dict(ix)
    assert payload["program_id"] == str(program_id)
    assert payload["op"] == "InitUserAccount"
    assert payload["keys"][0] == {"pubkey": str(key(1)), "is_signer": True, "is_writable": True}
    assert len(payload["keys"]) == 4
    assert base64.b64decode(payload["data"]) == b"\x00\x00"


def test_instruction_to_dict_unknown_opcode(program_id, key) -> None:
    ix = Instruction(program_id=program_id, data=b"\x09\x00", accounts=[])
    payload = instruction_to_dict(ix)
    assert payload["op"] is None
    assert payload["keys"] == []
