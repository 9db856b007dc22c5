"""
Тесты для ERC20Registry

Проверяет:
1. Регистрацию и двунаправленный поиск
2. Уникальность denom и erc20 (адрес без учёта регистра)
3. Отклонение невалидных и bridged деномов
4. resolve_denom для зарегистрированных и Ethereum-originated токенов
5. Импорт / экспорт в формате контракта erc20_to_denoms
"""

import logging

import pytest
from jsonschema import ValidationError

from src.core.domain import (
    DuplicateMappingError,
    ERC20ToDenom,
    InvalidAddressError,
    InvalidDenomError,
    MalformedDenomError,
    gravity_denom,
)
from src.registry import ERC20Registry


ATOM_ERC20 = "0x" + "a1" * 20
STAKE_ERC20 = "0x" + "b2" * 20
USDC_ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


@pytest.fixture
def registry() -> ERC20Registry:
    return ERC20Registry.from_records(
        [
            ERC20ToDenom(erc20=ATOM_ERC20, denom="uatom"),
            ERC20ToDenom(erc20=STAKE_ERC20, denom="stake"),
        ]
    )


class TestRegistration:
    """Тесты регистрации записей"""

    def test_lookup_both_directions(self, registry: ERC20Registry) -> None:
        assert registry.erc20_for_denom("uatom") == ATOM_ERC20
        assert registry.denom_for_erc20(STAKE_ERC20) == "stake"
        assert len(registry) == 2
        assert "uatom" in registry
        assert "ufoo" not in registry

    def test_lookup_missing(self, registry: ERC20Registry) -> None:
        assert registry.erc20_for_denom("ufoo") is None
        assert registry.denom_for_erc20(USDC_ADDRESS) is None

    def test_address_lookup_case_insensitive(self, registry: ERC20Registry) -> None:
        assert registry.denom_for_erc20(ATOM_ERC20.upper().replace("0X", "0x")) == "uatom"

    def test_records_in_registration_order(self, registry: ERC20Registry) -> None:
        assert [r.denom for r in registry.records()] == ["uatom", "stake"]
        assert [r.denom for r in registry] == ["uatom", "stake"]

    def test_duplicate_denom(self, registry: ERC20Registry) -> None:
        with pytest.raises(DuplicateMappingError, match="denom uatom"):
            registry.register(ERC20ToDenom(erc20=USDC_ADDRESS, denom="uatom"))
        assert len(registry) == 2

    def test_duplicate_erc20_any_case(self, registry: ERC20Registry) -> None:
        upper = "0x" + ATOM_ERC20[2:].upper()
        with pytest.raises(DuplicateMappingError, match="erc20"):
            registry.register(ERC20ToDenom(erc20=upper, denom="ufoo"))
        assert "ufoo" not in registry

    def test_invalid_record_rejected(self, registry: ERC20Registry) -> None:
        with pytest.raises(InvalidDenomError):
            registry.register(ERC20ToDenom(erc20=USDC_ADDRESS, denom=""))
        with pytest.raises(InvalidAddressError):
            registry.register(ERC20ToDenom(erc20="0xabc", denom="ufoo"))
        assert len(registry) == 2

    def test_bridged_denom_rejected(self, registry: ERC20Registry) -> None:
        with pytest.raises(InvalidDenomError, match="bridged denom"):
            registry.register(ERC20ToDenom(erc20=USDC_ADDRESS, denom=gravity_denom(USDC_ADDRESS)))

    @pytest.mark.parametrize("denom", ["gravity", "foo/bar", "ibc/ABCDEF"])
    def test_denom_rejected_by_gravity_grammar(self, registry: ERC20Registry, denom: str) -> None:
        """Зарезервированный префикс и чужие префиксы не регистрируются как нативные"""
        with pytest.raises(InvalidDenomError, match="denomination should be prefixed") as exc_info:
            registry.register(ERC20ToDenom(erc20=USDC_ADDRESS, denom=denom))
        assert isinstance(exc_info.value.cause, MalformedDenomError)
        assert denom not in registry
        assert registry.resolve_denom(USDC_ADDRESS) == gravity_denom(USDC_ADDRESS)

    def test_rejection_logged(self, registry: ERC20Registry, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="src.registry.erc20_registry"):
            with pytest.raises(DuplicateMappingError):
                registry.register(ERC20ToDenom(erc20=USDC_ADDRESS, denom="uatom"))
        assert "Rejected erc20 mapping" in caplog.text

    def test_from_records_stops_on_duplicate(self) -> None:
        with pytest.raises(DuplicateMappingError):
            ERC20Registry.from_records(
                [
                    ERC20ToDenom(erc20=ATOM_ERC20, denom="uatom"),
                    ERC20ToDenom(erc20=ATOM_ERC20, denom="stake"),
                ]
            )


class TestResolveDenom:
    """Тесты resolve_denom"""

    def test_cosmos_originated(self, registry: ERC20Registry) -> None:
        assert registry.resolve_denom(ATOM_ERC20) == "uatom"

    def test_ethereum_originated(self, registry: ERC20Registry) -> None:
        assert registry.resolve_denom(USDC_ADDRESS) == gravity_denom(USDC_ADDRESS)


class TestContractIO:
    """Тесты импорта / экспорта реестра"""

    def test_export(self, registry: ERC20Registry) -> None:
        assert registry.to_contract() == {
            "erc20_to_denoms": [
                {"erc20": ATOM_ERC20, "denom": "uatom"},
                {"erc20": STAKE_ERC20, "denom": "stake"},
            ]
        }

    def test_import_export_roundtrip(self, registry: ERC20Registry) -> None:
        restored = ERC20Registry.from_contract(registry.to_contract())
        assert restored.records() == registry.records()

    def test_import_empty(self) -> None:
        assert len(ERC20Registry.from_contract({"erc20_to_denoms": []})) == 0

    def test_import_schema_violation(self) -> None:
        with pytest.raises(ValidationError):
            ERC20Registry.from_contract({"erc20_to_denoms": [{"erc20": "0xabc", "denom": "uatom"}]})

    def test_import_semantic_violation(self) -> None:
        """Схема пропускает bridged деном, реестр — нет"""
        data = {
            "erc20_to_denoms": [
                {"erc20": USDC_ADDRESS, "denom": gravity_denom(USDC_ADDRESS)},
            ]
        }
        with pytest.raises(InvalidDenomError):
            ERC20Registry.from_contract(data)
