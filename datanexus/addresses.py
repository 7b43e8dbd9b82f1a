"""Program-derived addresses used by the DataNexus program.

The instruction builders take every account as an argument and never call
these; they are here for callers that need to look an address up first.
"""

from typing import Union

from solders.pubkey import Pubkey

from .types import BytesLike, ContentHash

OWNER_SEED = b"owner"
ACCESS_SEED = b"access"


def owner_address(authority: Pubkey, program_id: Pubkey) -> Pubkey:
    return Pubkey.find_program_address([OWNER_SEED, bytes(authority)], program_id)[0]


def access_address(authority: Pubkey, program_id: Pubkey) -> Pubkey:
    return Pubkey.find_program_address([ACCESS_SEED, bytes(authority)], program_id)[0]


def dataset_address(content_hash: Union[ContentHash, BytesLike, str], program_id: Pubkey) -> Pubkey:
    return Pubkey.find_program_address([bytes(ContentHash.coerce(content_hash))], program_id)[0]


def associated_access_address(authority: Pubkey, dataset: Pubkey, program_id: Pubkey) -> Pubkey:
    return Pubkey.find_program_address([bytes(authority), bytes(dataset)], program_id)[0]
