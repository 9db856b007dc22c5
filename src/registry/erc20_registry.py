"""ERC20 Registry — реестр соответствий Cosmos деномов и ERC20 контрактов.

Хранит Cosmos-originated деномы, для которых на Ethereum развёрнут ERC20:
- двунаправленный поиск denom ↔ erc20
- уникальность с обеих сторон
- сравнение адресов без учёта регистра

Ethereum-originated токены в реестр не попадают: их деном вычисляется
из адреса ('gravity/{address}').
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Dict

from src.core.contracts import validate_erc20_to_denoms_contract
from src.core.domain.denom import gravity_denom, is_bridged_denom, validate_gravity_denom
from src.core.domain.erc20_to_denom import ERC20ToDenom
from src.core.domain.errors import DenomError, DuplicateMappingError, InvalidDenomError


logger = logging.getLogger(__name__)


def _address_key(address: str) -> str:
    return address.lower()


class ERC20Registry:
    """Реестр ERC20 ↔ denom.

    Не потокобезопасен: экземпляром владеет вызывающий код.
    """

    def __init__(self) -> None:
        self._by_denom: dict[str, ERC20ToDenom] = {}
        self._by_erc20: dict[str, ERC20ToDenom] = {}

    @classmethod
    def from_records(cls, records: Iterable[ERC20ToDenom]) -> "ERC20Registry":
        """Построение реестра из записей (например, из genesis).

        Raises:
            MappingError: первая невалидная или дублирующая запись
        """
        registry = cls()
        for record in records:
            registry.register(record)
        return registry

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ERC20Registry":
        """Построение реестра из JSON экспорта (контракт erc20_to_denoms).

        Raises:
            ValidationError: данные не соответствуют схеме
            MappingError: невалидная или дублирующая запись
        """
        validate_erc20_to_denoms_contract(data)
        return cls.from_records(ERC20ToDenom(**item) for item in data["erc20_to_denoms"])

    def to_contract(self) -> Dict[str, Any]:
        """Экспорт реестра в формате контракта erc20_to_denoms."""
        return {"erc20_to_denoms": [record.model_dump() for record in self.records()]}

    def register(self, record: ERC20ToDenom) -> None:
        """Регистрация записи.

        Args:
            record: запись ERC20 ↔ denom

        Raises:
            InvalidDenomError: невалидный деном или bridged деном
            InvalidAddressError: невалидный адрес
            DuplicateMappingError: деном или адрес уже зарегистрированы
        """
        try:
            record.validate_basic()

            # Ваучеры моста не могут быть Cosmos-originated
            if is_bridged_denom(record.denom):
                raise InvalidDenomError(
                    message=f"bridged denom {record.denom} cannot be registered as cosmos-originated"
                )

            # Деном должен приниматься остальными компонентами как нативный
            try:
                validate_gravity_denom(record.denom)
            except DenomError as e:
                raise InvalidDenomError(e) from e

            if record.denom in self._by_denom:
                raise DuplicateMappingError(f"denom {record.denom} already registered")

            key = _address_key(record.erc20)
            if key in self._by_erc20:
                raise DuplicateMappingError(f"erc20 {record.erc20} already registered")
        except ValueError as e:
            logger.warning("Rejected erc20 mapping %s -> %s: %s", record.denom, record.erc20, e)
            raise

        self._by_denom[record.denom] = record
        self._by_erc20[key] = record
        logger.debug("Registered erc20 mapping %s -> %s", record.denom, record.erc20)

    def erc20_for_denom(self, denom: str) -> str | None:
        """Адрес ERC20 для Cosmos денома или None."""
        record = self._by_denom.get(denom)
        return record.erc20 if record else None

    def denom_for_erc20(self, erc20_address: str) -> str | None:
        """Cosmos деном для адреса ERC20 или None."""
        record = self._by_erc20.get(_address_key(erc20_address))
        return record.denom if record else None

    def resolve_denom(self, erc20_address: str) -> str:
        """Деном, в котором актив с данным адресом существует на Cosmos.

        Returns:
            Cosmos деном для зарегистрированного адреса, иначе 'gravity/{address}'
        """
        denom = self.denom_for_erc20(erc20_address)
        if denom is not None:
            return denom
        return gravity_denom(erc20_address)

    def records(self) -> list[ERC20ToDenom]:
        """Записи в порядке регистрации."""
        return list(self._by_denom.values())

    def __len__(self) -> int:
        return len(self._by_denom)

    def __iter__(self) -> Iterator[ERC20ToDenom]:
        return iter(self.records())

    def __contains__(self, denom: object) -> bool:
        return denom in self._by_denom
