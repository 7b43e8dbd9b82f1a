from .accounts import ACCOUNT_TABLES, SYS_PROGRAM_ID, TOKEN_PROGRAM_ID, account_metas
from .codec import encode
from .errors import (
    AmountOverflowError,
    ConfigurationError,
    DataNexusError,
    InvalidLengthError,
    MissingAccountError,
    ShareLimitOverflowError,
    UnknownAccountError,
)
from .params import InitParams, KeyParam, ReferenceDataParam, ShareLimitParam, ValueParam, encode_params
from .tx_builder import (
    DataNexusInstructions,
    build_init_data_account_ix,
    build_init_user_account_ix,
    build_purchase_access_ix,
    build_set_data_params_ix,
    build_share_access_ix,
    instruction_to_dict,
)
from .types import AccountType, Amount, ContentHash, Opcode

__version__ = "0.1.0"
