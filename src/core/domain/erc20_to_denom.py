"""
ERC20ToDenom — Запись соответствия Cosmos денома и ERC20 контракта

Immutable Pydantic модель для записей allow-листа / реестра: Cosmos-originated
деном, для которого на стороне Ethereum развёрнут ERC20 контракт.

Поля проверяются независимо друг от друга; связь между ними утверждает
создатель записи.
"""

from pydantic import BaseModel, Field

from .base_denom import validate_base_denom
from .errors import BaseDenomError, EthAddressError, InvalidAddressError, InvalidDenomError
from .eth_address import validate_eth_address


def validate_erc20_to_denom(denom: str, erc20_address: str) -> None:
    """
    Проверка пары (denom, erc20).

    Args:
        denom: Cosmos деном
        erc20_address: Адрес ERC20 контракта

    Raises:
        InvalidDenomError: Деном не проходит базовую грамматику
        InvalidAddressError: Адрес не является валидным Ethereum адресом
    """
    try:
        validate_base_denom(denom)
    except BaseDenomError as e:
        raise InvalidDenomError(e) from e

    try:
        validate_eth_address(erc20_address)
    except EthAddressError as e:
        raise InvalidAddressError(e) from e


class ERC20ToDenom(BaseModel):
    """
    Запись реестра ERC20 ↔ denom.

    Создание модели не валидирует содержимое строк: проверка выполняется
    явно через validate_basic(), чтобы вызывающий код получил
    InvalidDenomError / InvalidAddressError, а не pydantic ValidationError.
    """

    erc20: str = Field(..., description="Адрес ERC20 контракта (0x + 40 hex)")
    denom: str = Field(..., description="Cosmos деном")

    model_config = {"frozen": True}

    def validate_basic(self) -> None:
        """
        Независимая проверка обоих полей.

        Raises:
            InvalidDenomError: Невалидный деном
            InvalidAddressError: Невалидный адрес
        """
        validate_erc20_to_denom(self.denom, self.erc20)
