"""Tests for territory Pydantic models and the Result container."""

from datetime import date

import pytest
from pydantic import ValidationError

from territory_kb.errors import NotFoundError
from territory_kb.models.common import MeasurementSystem, OfficialStatus, PaperSize
from territory_kb.models.result import Result
from territory_kb.models.territory import (
    AttributeRecord,
    CurrencyPeriod,
    LanguagePopulation,
    TerritoryDataset,
)


# ===================================================================
# AttributeRecord
# ===================================================================


class TestAttributeRecord:
    def test_values_kept_exactly(self, gb_info) -> None:
        record = AttributeRecord.model_validate(gb_info)
        assert record.population == 64430400
        assert record.gdp == 2788000000000
        assert record.literacy_percent == 99
        assert record.telephone_country_code == 44
        assert record.measurement_system == MeasurementSystem.METRIC
        assert record.paper_size == PaperSize.A4

    def test_currency_mapping_becomes_periods(self, gb_info) -> None:
        record = AttributeRecord.model_validate(gb_info)
        assert record.currency == (
            CurrencyPeriod(code="GBP", from_date=date(1694, 7, 27)),
        )
        assert record.current_currency == "GBP"

    def test_currency_list_form(self) -> None:
        record = AttributeRecord(
            currency=[
                {"code": "PTE", "from": "1911-05-22", "to": "2002-02-28"},
                {"code": "EUR", "from": "1999-01-01"},
            ],
        )
        assert [p.code for p in record.currency] == ["PTE", "EUR"]
        assert record.currency[0].to_date == date(2002, 2, 28)
        assert record.current_currency == "EUR"

    def test_no_open_currency_period(self) -> None:
        record = AttributeRecord(currency={"DEM": {"from": "1948-06-20", "to": "2002-02-28"}})
        assert record.current_currency is None

    def test_language_population(self, gb_info) -> None:
        record = AttributeRecord.model_validate(gb_info)
        gd = record.language_population["gd"]
        assert gd == LanguagePopulation(
            population_percent=0.099,
            official_status=OfficialStatus.OFFICIAL_REGIONAL,
            writing_percent=5,
        )
        assert record.language_population["de"].official_status is None
        assert record.official_languages == ["en"]

    def test_empty_record(self) -> None:
        record = AttributeRecord()
        assert record.population is None
        assert record.currency == ()
        assert record.language_population == {}

    def test_frozen(self) -> None:
        record = AttributeRecord(population=1)
        with pytest.raises(ValidationError):
            record.population = 2

    def test_currency_periods_are_a_tuple(self, gb_info) -> None:
        record = AttributeRecord.model_validate(gb_info)
        assert isinstance(record.currency, tuple)
        assert not hasattr(record.currency, "clear")

    def test_unknown_official_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LanguagePopulation(population_percent=1, official_status="mandatory")


class TestTerritoryDataset:
    def test_defaults_empty(self) -> None:
        ds = TerritoryDataset()
        assert ds.containment == {}
        assert ds.locales == {}
        assert ds.territory_info == {}

    def test_declaration_order_preserved(self, dataset) -> None:
        assert list(dataset.locales["en"])[:3] == ["GB", "PT", "US"]
        assert dataset.containment["EU"][-1] == "RO"

    def test_none_records_allowed(self, dataset) -> None:
        assert dataset.territory_info["AT"] is None
        assert isinstance(dataset.territory_info["GB"], AttributeRecord)


# ===================================================================
# Result
# ===================================================================


class TestResult:
    def test_success(self) -> None:
        result = Result.success("United Kingdom")
        assert result.ok
        assert result.unwrap() == "United Kingdom"
        assert result.unwrap_or("?") == "United Kingdom"

    def test_failure_unwrap_raises_original(self) -> None:
        error = NotFoundError("territory code: ZZ not available")
        result = Result.failure(error)
        assert not result.ok
        with pytest.raises(NotFoundError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_failure_unwrap_or(self) -> None:
        assert Result.failure(NotFoundError("x")).unwrap_or([]) == []
