import base64
import logging
from typing import Optional, Union

from solders.instruction import Instruction

from .accounts import SYS_PROGRAM_ID, TOKEN_PROGRAM_ID, PubkeyLike, account_metas, to_pubkey
from .codec import (
    encode_init_data_account,
    encode_init_user_account,
    encode_purchase_access,
    encode_set_data_params,
    encode_share_access,
)
from .config import Settings, get_settings
from .params import DatasetParams, encode_params
from .types import AccountType, Amount, BytesLike, ContentHash, Opcode

logger = logging.getLogger("datanexus")

HashLike = Union[ContentHash, BytesLike, str]


def _build_ix(program_id: PubkeyLike, opcode: Opcode, data: bytes, **accounts: PubkeyLike) -> Instruction:
    metas = account_metas(opcode, **accounts)
    logger.debug("instruction_built op=%s accounts=%s data_len=%s", opcode.name, len(metas), len(data))
    return Instruction(program_id=to_pubkey(program_id), data=data, accounts=metas)


def build_init_user_account_ix(
    program_id: PubkeyLike,
    payer: PubkeyLike,
    authority: PubkeyLike,
    user_account: PubkeyLike,
    account_type: Union[AccountType, int, str],
    system_program: PubkeyLike = SYS_PROGRAM_ID,
) -> Instruction:
    data = encode_init_user_account(account_type)
    return _build_ix(
        program_id,
        Opcode.InitUserAccount,
        data,
        payer=payer,
        authority=authority,
        user_account=user_account,
        system_program=system_program,
    )


def build_init_data_account_ix(
    program_id: PubkeyLike,
    authority: PubkeyLike,
    owner_account: PubkeyLike,
    dataset_account: PubkeyLike,
    content_hash: HashLike,
    system_program: PubkeyLike = SYS_PROGRAM_ID,
) -> Instruction:
    data = encode_init_data_account(content_hash)
    return _build_ix(
        program_id,
        Opcode.InitDataAccount,
        data,
        authority=authority,
        owner_account=owner_account,
        dataset_account=dataset_account,
        system_program=system_program,
    )


def build_set_data_params_ix(
    program_id: PubkeyLike,
    authority: PubkeyLike,
    dataset_account: PubkeyLike,
    content_hash: HashLike,
    params: Union[DatasetParams, BytesLike],
) -> Instruction:
    data = encode_set_data_params(content_hash, encode_params(params))
    return _build_ix(
        program_id,
        Opcode.SetDataParams,
        data,
        authority=authority,
        dataset_account=dataset_account,
    )


def build_purchase_access_ix(
    program_id: PubkeyLike,
    user_authority: PubkeyLike,
    user_access_account: PubkeyLike,
    user_token_account: PubkeyLike,
    owner_authority: PubkeyLike,
    owner_token_account: PubkeyLike,
    dataset_account: PubkeyLike,
    content_hash: HashLike,
    amount: Union[Amount, int],
    token_program: PubkeyLike = TOKEN_PROGRAM_ID,
) -> Instruction:
    data = encode_purchase_access(content_hash, amount)
    return _build_ix(
        program_id,
        Opcode.PurchaseAccess,
        data,
        user_authority=user_authority,
        user_access_account=user_access_account,
        user_token_account=user_token_account,
        owner_authority=owner_authority,
        owner_token_account=owner_token_account,
        dataset_account=dataset_account,
        token_program=token_program,
    )


def build_share_access_ix(
    program_id: PubkeyLike,
    user_authority: PubkeyLike,
    user_access_account: PubkeyLike,
    recipient_authority: PubkeyLike,
    recipient_access_account: PubkeyLike,
    dataset_account: PubkeyLike,
    content_hash: HashLike,
) -> Instruction:
    data = encode_share_access(content_hash)
    return _build_ix(
        program_id,
        Opcode.ShareAccess,
        data,
        user_authority=user_authority,
        user_access_account=user_access_account,
        recipient_authority=recipient_authority,
        recipient_access_account=recipient_access_account,
        dataset_account=dataset_account,
    )


class DataNexusInstructions:
    """Instruction builders bound to one deployment of the program."""

    def __init__(
        self,
        program_id: PubkeyLike,
        system_program: PubkeyLike = SYS_PROGRAM_ID,
        token_program: PubkeyLike = TOKEN_PROGRAM_ID,
    ):
        self.program_id = to_pubkey(program_id)
        self.system_program = to_pubkey(system_program)
        self.token_program = to_pubkey(token_program)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DataNexusInstructions":
        settings = settings or get_settings()
        return cls(
            settings.pubkey("program_id"),
            system_program=settings.pubkey("system_program_id"),
            token_program=settings.pubkey("token_program_id"),
        )

    def init_user_account(
        self,
        payer: PubkeyLike,
        authority: PubkeyLike,
        user_account: PubkeyLike,
        account_type: Union[AccountType, int, str],
    ) -> Instruction:
        return build_init_user_account_ix(
            self.program_id, payer, authority, user_account, account_type, system_program=self.system_program
        )

    def init_data_account(
        self,
        authority: PubkeyLike,
        owner_account: PubkeyLike,
        dataset_account: PubkeyLike,
        content_hash: HashLike,
    ) -> Instruction:
        return build_init_data_account_ix(
            self.program_id, authority, owner_account, dataset_account, content_hash, system_program=self.system_program
        )

    def set_data_params(
        self,
        authority: PubkeyLike,
        dataset_account: PubkeyLike,
        content_hash: HashLike,
        params: Union[DatasetParams, BytesLike],
    ) -> Instruction:
        return build_set_data_params_ix(self.program_id, authority, dataset_account, content_hash, params)

    def purchase_access(
        self,
        user_authority: PubkeyLike,
        user_access_account: PubkeyLike,
        user_token_account: PubkeyLike,
        owner_authority: PubkeyLike,
        owner_token_account: PubkeyLike,
        dataset_account: PubkeyLike,
        content_hash: HashLike,
        amount: Union[Amount, int],
    ) -> Instruction:
        return build_purchase_access_ix(
            self.program_id,
            user_authority,
            user_access_account,
            user_token_account,
            owner_authority,
            owner_token_account,
            dataset_account,
            content_hash,
            amount,
            token_program=self.token_program,
        )

    def share_access(
        self,
        user_authority: PubkeyLike,
        user_access_account: PubkeyLike,
        recipient_authority: PubkeyLike,
        recipient_access_account: PubkeyLike,
        dataset_account: PubkeyLike,
        content_hash: HashLike,
    ) -> Instruction:
        return build_share_access_ix(
            self.program_id,
            user_authority,
            user_access_account,
            recipient_authority,
            recipient_access_account,
            dataset_account,
            content_hash,
        )


def instruction_to_dict(ix: Instruction) -> dict:
    """JSON-ready view of an instruction for an external signer.

    ``op`` names the DataNexus operation from the leading opcode byte, or is
    None when the payload does not start with a known opcode.
    """
    data = bytes(ix.data)
    op = None
    if data:
        try:
            op = Opcode(data[0]).name
        except ValueError:
            pass
    return {
        "program_id": str(ix.program_id),
        "op": op,
        "keys": [
            {"pubkey": str(meta.pubkey), "is_signer": meta.is_signer, "is_writable": meta.is_writable}
            for meta in ix.accounts
        ],
        "data": base64.b64encode(data).decode(),
    }
