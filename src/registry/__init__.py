"""Registry — реестр соответствий Cosmos деномов и ERC20 контрактов."""

from .erc20_registry import ERC20Registry

__all__ = [
    "ERC20Registry",
]
