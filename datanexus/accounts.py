import logging
from typing import Dict, List, Tuple, Union

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from .errors import MissingAccountError, UnknownAccountError
from .types import Opcode

logger = logging.getLogger("datanexus")

SYS_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")

PubkeyLike = Union[Pubkey, str]

# (role, is_signer, is_writable), in the exact order the program reads them.
ACCOUNT_TABLES: Dict[Opcode, Tuple[Tuple[str, bool, bool], ...]] = {
    Opcode.InitUserAccount: (
        ("payer", True, True),
        ("authority", False, True),
        ("user_account", False, True),
        ("system_program", False, False),
    ),
    Opcode.InitDataAccount: (
        ("authority", True, True),
        ("owner_account", False, True),
        ("dataset_account", False, True),
        ("system_program", False, False),
    ),
    Opcode.SetDataParams: (
        ("authority", True, True),
        ("dataset_account", False, True),
    ),
    Opcode.PurchaseAccess: (
        ("user_authority", True, True),
        ("user_access_account", False, True),
        ("user_token_account", False, True),
        ("owner_authority", False, True),
        ("owner_token_account", False, True),
        ("dataset_account", False, False),
        ("token_program", False, False),
    ),
    Opcode.ShareAccess: (
        ("user_authority", True, True),
        ("user_access_account", False, True),
        ("recipient_authority", False, True),
        ("recipient_access_account", False, True),
        ("dataset_account", False, False),
    ),
}


def to_pubkey(value: PubkeyLike) -> Pubkey:
    if isinstance(value, Pubkey):
        return value
    return Pubkey.from_string(value)


def account_roles(opcode: Opcode) -> List[str]:
    return [role for role, _, _ in ACCOUNT_TABLES[Opcode(opcode)]]


def account_metas(opcode: Opcode, **roles: PubkeyLike) -> List[AccountMeta]:
    """Lay out the accounts for ``opcode`` in program order.

    Every role in the operation's table must be given, and nothing else; the
    program resolves accounts by position, so a missing or extra entry would
    shift everything after it.
    """
    opcode = Opcode(opcode)
    table = ACCOUNT_TABLES[opcode]
    expected = [role for role, _, _ in table]
    missing = [role for role in expected if roles.get(role) is None]
    if missing:
        raise MissingAccountError(opcode.name, missing)
    unknown = sorted(set(roles) - set(expected))
    if unknown:
        raise UnknownAccountError(opcode.name, unknown)

    named_accounts: List[Tuple[str, AccountMeta]] = [
        (role, AccountMeta(pubkey=to_pubkey(roles[role]), is_signer=is_signer, is_writable=is_writable))
        for role, is_signer, is_writable in table
    ]
    if logger.isEnabledFor(logging.DEBUG):
        for idx, (name, meta) in enumerate(named_accounts):
            logger.debug("account_meta op=%s idx=%s role=%s pubkey=%s", opcode.name, idx, name, meta.pubkey)
    return [meta for _, meta in named_accounts]
