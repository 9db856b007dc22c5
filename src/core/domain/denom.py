"""
Denom — Схема деноминаций активов моста Gravity

Каждый актив на стороне Cosmos описывается строковым деномом одного из видов:
- нативный (Cosmos-originated): базовый деном без префикса моста, например 'uatom'
- bridged (Ethereum-originated): 'gravity/{address}', где address — адрес ERC20
  контракта, например 'gravity/0xa478c2975ab1ea89e8196811f51a7b7ade33eb11'

Модуль — единственный источник правил построения и разбора деномов.
Mint/burn, балансы и allow-листы обязаны использовать только эти функции.

Все функции чистые, без общего изменяемого состояния.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .base_denom import validate_base_denom
from .errors import (
    BaseDenomError,
    DenomError,
    EthAddressError,
    InvalidContractAddressError,
    MalformedDenomError,
)
from .eth_address import ETH_CONTRACT_ADDRESS_LEN, validate_eth_address


# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Префикс всех активов, выпускаемых модулем (имя модуля)
GRAVITY_DENOM_PREFIX: Final[str] = "gravity"

# Разделитель префикса и адреса
GRAVITY_DENOM_SEPARATOR: Final[str] = "/"

# Длина деномов, выпускаемых модулем
GRAVITY_DENOM_LEN: Final[int] = (
    len(GRAVITY_DENOM_PREFIX) + len(GRAVITY_DENOM_SEPARATOR) + ETH_CONTRACT_ADDRESS_LEN
)

_GRAVITY_DENOM_FULL_PREFIX: Final[str] = GRAVITY_DENOM_PREFIX + GRAVITY_DENOM_SEPARATOR

_MALFORMED_MESSAGE: Final[str] = (
    "denomination should be prefixed with the format "
    f"'{GRAVITY_DENOM_PREFIX}{GRAVITY_DENOM_SEPARATOR}{{address}}'"
)


# =============================================================================
# ENUMS / RESULT
# =============================================================================


class DenomKind(str, Enum):
    """Классификация денома"""

    NATIVE = "NATIVE"
    BRIDGED = "BRIDGED"
    INVALID = "INVALID"


@dataclass(frozen=True)
class DenomClass:
    """Результат полной классификации денома."""

    denom: str
    kind: DenomKind

    # Только для BRIDGED
    contract_address: str | None = None

    # Только для INVALID
    error: DenomError | None = None

    @property
    def is_valid(self) -> bool:
        return self.kind != DenomKind.INVALID


# =============================================================================
# КОДЕК
# =============================================================================


def gravity_denom(contract_address: str) -> str:
    """
    Деном для ERC20 токена в формате 'gravity/{address}'.

    Адрес не валидируется: вызывающий код передаёт уже проверенный адрес.

    Example:
        >>> gravity_denom("0xa478c2975ab1ea89e8196811f51a7b7ade33eb11")
        'gravity/0xa478c2975ab1ea89e8196811f51a7b7ade33eb11'
    """
    return f"{GRAVITY_DENOM_PREFIX}{GRAVITY_DENOM_SEPARATOR}{contract_address}"


def gravity_denom_to_erc20(denom: str) -> str:
    """
    Адрес ERC20 контракта из bridged денома.

    Снимается только ведущий 'gravity/'. Если префикса нет, строка
    возвращается без изменений; классификацию выполняет вызывающий код.
    Строгий вариант: require_erc20_contract.
    """
    return denom.removeprefix(_GRAVITY_DENOM_FULL_PREFIX)


def require_erc20_contract(denom: str) -> str:
    """
    Адрес ERC20 контракта из bridged денома, с проверкой префикса.

    Raises:
        MalformedDenomError: Если деном не начинается с 'gravity/'
    """
    if not is_bridged_denom(denom):
        raise MalformedDenomError(f"{_MALFORMED_MESSAGE}, got '{denom}'")
    return gravity_denom_to_erc20(denom)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_bridged_denom(denom: str) -> bool:
    """Деном выпущен мостом (начинается с 'gravity/'). Валидность не проверяется."""
    return denom.startswith(_GRAVITY_DENOM_FULL_PREFIX)


def is_native_denom(denom: str) -> bool:
    """Деном нативный для Cosmos (не bridged)."""
    return not is_bridged_denom(denom)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _split_denom(denom: str) -> list[str]:
    return denom.split(GRAVITY_DENOM_SEPARATOR, 1)


def _is_malformed(denom: str, parts: list[str]) -> bool:
    """
    Случай (a): строка не соответствует ни одному из форматов.

    - пустая строка
    - голый префикс 'gravity' (зарезервирован, не нативный деном)
    - 'x/...' где x != 'gravity'
    - 'gravity/' с пустым адресом
    """
    if denom.strip() == "":
        return True
    if len(parts) == 1:
        return parts[0] == GRAVITY_DENOM_PREFIX
    return parts[0] != GRAVITY_DENOM_PREFIX or parts[1].strip() == ""


def _is_native(denom: str, parts: list[str]) -> bool:
    """Случай (b): разделителя нет, деном уже проверен базовой грамматикой."""
    return parts[0] == denom and denom.strip() != ""


def validate_gravity_denom(denom: str) -> None:
    """
    Проверка денома: нативный ('uatom') или bridged ('gravity/{address}').

    Порядок проверок:
    1. Пустая строка — MalformedDenomError
    2. Базовая грамматика — BaseDenomError пробрасывается как есть
    3. (a) malformed → (b) native → (c) bridged с проверкой адреса

    Args:
        denom: Деном для проверки

    Raises:
        MalformedDenomError: Формат не соответствует 'gravity/{address}'
        BaseDenomError: Нарушена базовая грамматика
        InvalidContractAddressError: Адрес в bridged деноме невалиден
    """
    if denom == "":
        raise MalformedDenomError(_MALFORMED_MESSAGE)

    validate_base_denom(denom)

    parts = _split_denom(denom)

    if _is_malformed(denom, parts):
        raise MalformedDenomError(_MALFORMED_MESSAGE)

    if _is_native(denom, parts):
        return

    try:
        validate_eth_address(parts[1])
    except EthAddressError as e:
        raise InvalidContractAddressError(e) from e


def classify_gravity_denom(denom: str) -> DenomClass:
    """
    Полная классификация денома без exception.

    Returns:
        DenomClass с kind NATIVE / BRIDGED / INVALID
    """
    try:
        validate_gravity_denom(denom)
    except (MalformedDenomError, BaseDenomError, InvalidContractAddressError) as e:
        return DenomClass(denom=denom, kind=DenomKind.INVALID, error=e)

    if is_bridged_denom(denom):
        return DenomClass(
            denom=denom,
            kind=DenomKind.BRIDGED,
            contract_address=gravity_denom_to_erc20(denom),
        )
    return DenomClass(denom=denom, kind=DenomKind.NATIVE)
