"""
Валидация Ethereum адресов

Адрес контракта ERC20: 20 байт в hex с префиксом '0x', всего 42 символа.
Регистр символов не проверяется (EIP-55 checksum не требуется).
"""

import re
from typing import Final

from .errors import EthAddressError


# Длина строки адреса: '0x' + 40 hex символов
ETH_CONTRACT_ADDRESS_LEN: Final[int] = 42

_ETH_ADDRESS_REGEX: Final[re.Pattern[str]] = re.compile(r"^0x[0-9a-fA-F]{40}$")


def validate_eth_address(address: str) -> None:
    """
    Проверка Ethereum адреса.

    Args:
        address: Адрес в формате '0x' + 40 hex символов

    Raises:
        EthAddressError: Если адрес пустой, не проходит regex или имеет неверную длину
    """
    if address == "":
        raise EthAddressError("empty")

    if _ETH_ADDRESS_REGEX.match(address) is None:
        raise EthAddressError(f"address({address}) doesn't pass regex")

    # regex допускает завершающий '\n' перед $
    if len(address) != ETH_CONTRACT_ADDRESS_LEN:
        raise EthAddressError(
            f"address({address}) of the wrong length exp({ETH_CONTRACT_ADDRESS_LEN}) "
            f"actual({len(address)})"
        )


def is_valid_eth_address(address: str) -> bool:
    """Проверка без exception"""
    try:
        validate_eth_address(address)
    except EthAddressError:
        return False
    return True
