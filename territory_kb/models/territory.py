"""Territory attribute records and the in-memory dataset model.

``TerritoryDataset`` is the contract with whatever loads the upstream
territory data: three already-parsed tables (containment, per-locale names,
attribute records). Pydantic coerces plain dicts, so a loader can hand over
JSON-shaped data directly.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field, field_validator

from territory_kb.models.common import (
    MeasurementSystem,
    OfficialStatus,
    PaperSize,
    TerritoryBase,
)


class CurrencyPeriod(TerritoryBase):
    """One entry of a territory's currency history."""

    code: str
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    tender: bool | None = None


class LanguagePopulation(TerritoryBase):
    """Share of a territory's population using one language."""

    population_percent: float
    official_status: OfficialStatus | None = None
    writing_percent: float | None = None


class AttributeRecord(TerritoryBase):
    """Non-localized descriptive data about a single territory.

    Values are kept exactly as declared in the dataset.
    """

    population: int | None = None
    gdp: int | None = None
    literacy_percent: float | None = None
    measurement_system: MeasurementSystem | None = None
    temperature_measurement: MeasurementSystem | None = None
    paper_size: PaperSize | None = None
    telephone_country_code: int | None = None
    currency: tuple[CurrencyPeriod, ...] = Field(default_factory=tuple)
    language_population: dict[str, LanguagePopulation] = Field(
        default_factory=dict,
    )

    @field_validator("currency", mode="before")
    @classmethod
    def _currency_from_mapping(cls, value: Any) -> Any:
        """Accept ``{"GBP": {"from": ...}}`` as well as a list of periods."""
        if isinstance(value, dict):
            return [{"code": code, **(period or {})} for code, period in value.items()]
        return value

    @property
    def current_currency(self) -> str | None:
        """Code of the latest currency period without an end date."""
        for period in reversed(self.currency):
            if period.to_date is None:
                return period.code
        return None

    @property
    def official_languages(self) -> list[str]:
        return sorted(
            lang for lang, share in self.language_population.items()
            if share.official_status == OfficialStatus.OFFICIAL
        )


class TerritoryDataset(TerritoryBase):
    """All data the knowledge base is built from.

    Attributes:
        containment: parent code -> ordered child codes.
        locales: locale -> {code -> display name}, in declaration order.
        territory_info: code -> attribute record. Its keys are the
            authoritative universe of valid territory codes; a code may map
            to None when it is valid but carries no record.
    """

    containment: dict[str, list[str]] = Field(default_factory=dict)
    locales: dict[str, dict[str, str]] = Field(default_factory=dict)
    territory_info: dict[str, AttributeRecord | None] = Field(default_factory=dict)
