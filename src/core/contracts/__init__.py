"""
Contract Validation Module

Модуль для валидации JSON контрактов реестра ERC20 ↔ denom.
"""

from .validators import (
    ContractValidator,
    ERC20ToDenomsValidator,
    ERC20ToDenomValidator,
    SchemaLoader,
    validate_erc20_to_denom_contract,
    validate_erc20_to_denoms_contract,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ERC20ToDenomValidator",
    "ERC20ToDenomsValidator",
    # Functions
    "validate_erc20_to_denom_contract",
    "validate_erc20_to_denoms_contract",
]
