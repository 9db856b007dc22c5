"""GATE 0: Проверка денома перед отправкой через мост

Проверяет деном отправляемого актива и выбирает маршрут:
- bridged ('gravity/{address}', Ethereum-originated) → BURN:
  ваучер сжигается на Cosmos, токен разблокируется на Ethereum
- нативный (Cosmos-originated) → LOCK:
  монеты блокируются в аккаунте модуля, на Ethereum выпускается ERC20

Интеграция:
- Использует src.core.domain.denom как единственный источник грамматики
- Результат используется обработчиком отправки для выбора mint/burn или lock/unlock
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.core.domain.denom import DenomKind, classify_gravity_denom


logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class BridgeRoute(str, Enum):
    """Маршрут актива через мост"""

    BURN = "BURN"  # Ethereum-originated: burn ваучера
    LOCK = "LOCK"  # Cosmos-originated: escrow в модуле
    NONE = "NONE"  # Передача заблокирована


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    transfer_allowed: bool
    block_reason: str

    kind: DenomKind
    route: BridgeRoute

    # Только для bridged деномов
    contract_address: str | None

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Gate00Config:
    """Конфигурация GATE 0.

    Позволяет временно отключить одно из направлений моста.
    """

    allow_native: bool = True
    allow_bridged: bool = True


# =============================================================================
# GATE 0
# =============================================================================


class Gate00DenomCheck:
    """GATE 0: Проверка денома и выбор маршрута.

    Порядок проверок:
    1. Полная валидация денома (INVALID → блок)
    2. Разрешено ли направление конфигурацией
    3. Выбор маршрута BURN / LOCK
    """

    def __init__(self, config: Gate00Config | None = None):
        """Инициализация GATE 0.

        Args:
            config: конфигурация gate (опционально, используется default)
        """
        self.config = config or Gate00Config()

    def evaluate(self, denom: str) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            denom: деном отправляемого актива

        Returns:
            Gate00Result с решением о допуске и маршрутом
        """
        # 1. Валидация
        denom_class = classify_gravity_denom(denom)
        if not denom_class.is_valid:
            reason = f"invalid_denom: {denom_class.error}"
            logger.debug("GATE 0 blocked denom %r: %s", denom, denom_class.error)
            return self._blocked_result(reason=reason, kind=DenomKind.INVALID)

        # 2. Направления
        if denom_class.kind == DenomKind.BRIDGED:
            if not self.config.allow_bridged:
                return self._blocked_result(
                    reason="bridged_disabled",
                    kind=DenomKind.BRIDGED,
                    contract_address=denom_class.contract_address,
                )
            return Gate00Result(
                transfer_allowed=True,
                block_reason="",
                kind=DenomKind.BRIDGED,
                route=BridgeRoute.BURN,
                contract_address=denom_class.contract_address,
                details=f"Ethereum-originated token {denom_class.contract_address}: burn voucher",
            )

        if not self.config.allow_native:
            return self._blocked_result(reason="native_disabled", kind=DenomKind.NATIVE)

        # 3. PASS
        return Gate00Result(
            transfer_allowed=True,
            block_reason="",
            kind=DenomKind.NATIVE,
            route=BridgeRoute.LOCK,
            contract_address=None,
            details=f"Cosmos-originated coin {denom}: lock in module account",
        )

    def _blocked_result(
        self,
        reason: str,
        kind: DenomKind,
        contract_address: str | None = None,
    ) -> Gate00Result:
        """Создание blocked result.

        Args:
            reason: причина блокировки
            kind: классификация денома
            contract_address: адрес контракта (для bridged)

        Returns:
            Gate00Result с transfer_allowed=False
        """
        return Gate00Result(
            transfer_allowed=False,
            block_reason=reason,
            kind=kind,
            route=BridgeRoute.NONE,
            contract_address=contract_address,
            details=reason,
        )
