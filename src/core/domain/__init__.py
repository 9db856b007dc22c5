"""
Domain models and value objects.

Contains the bridge denomination grammar, address and denom validators,
and the ERC20ToDenom mapping record.
"""

from src.core.domain.base_denom import (
    BASE_DENOM_MAX_LEN,
    BASE_DENOM_MIN_LEN,
    is_valid_base_denom,
    validate_base_denom,
)
from src.core.domain.denom import (
    GRAVITY_DENOM_LEN,
    GRAVITY_DENOM_PREFIX,
    GRAVITY_DENOM_SEPARATOR,
    DenomClass,
    DenomKind,
    classify_gravity_denom,
    gravity_denom,
    gravity_denom_to_erc20,
    is_bridged_denom,
    is_native_denom,
    require_erc20_contract,
    validate_gravity_denom,
)
from src.core.domain.erc20_to_denom import ERC20ToDenom, validate_erc20_to_denom
from src.core.domain.errors import (
    BaseDenomError,
    DenomError,
    DuplicateMappingError,
    EthAddressError,
    InvalidAddressError,
    InvalidContractAddressError,
    InvalidDenomError,
    MalformedDenomError,
    MappingError,
)
from src.core.domain.eth_address import (
    ETH_CONTRACT_ADDRESS_LEN,
    is_valid_eth_address,
    validate_eth_address,
)

__all__ = [
    # Base denom
    "BASE_DENOM_MIN_LEN",
    "BASE_DENOM_MAX_LEN",
    "validate_base_denom",
    "is_valid_base_denom",
    # Eth address
    "ETH_CONTRACT_ADDRESS_LEN",
    "validate_eth_address",
    "is_valid_eth_address",
    # Gravity denom
    "GRAVITY_DENOM_PREFIX",
    "GRAVITY_DENOM_SEPARATOR",
    "GRAVITY_DENOM_LEN",
    "DenomKind",
    "DenomClass",
    "gravity_denom",
    "gravity_denom_to_erc20",
    "require_erc20_contract",
    "is_bridged_denom",
    "is_native_denom",
    "validate_gravity_denom",
    "classify_gravity_denom",
    # Mapping record
    "ERC20ToDenom",
    "validate_erc20_to_denom",
    # Errors
    "DenomError",
    "BaseDenomError",
    "EthAddressError",
    "MalformedDenomError",
    "InvalidContractAddressError",
    "MappingError",
    "InvalidDenomError",
    "InvalidAddressError",
    "DuplicateMappingError",
]
