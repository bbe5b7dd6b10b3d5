"""Shared pytest fixtures for the territory knowledge base test suite.

Provides:
- raw_dataset: CLDR-shaped plain dicts (en/pt names, containment, attributes)
- dataset: the same data validated into a TerritoryDataset
- settings: Settings isolated from the process environment and .env
- service: TerritoryService built from the dataset
"""

import pytest

from territory_kb.config.settings import Settings
from territory_kb.locales.current import set_current_locale
from territory_kb.models.territory import TerritoryDataset
from territory_kb.territory.service import TerritoryService

EU_MEMBERS = [
    "AT", "BE", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR", "GB", "GR",
    "HR", "HU", "IE", "IT", "LT", "LU", "LV", "MT", "NL", "PL", "PT", "SE",
    "SI", "SK", "BG", "RO",
]

GB_INFO = {
    "currency": {"GBP": {"from": "1694-07-27"}},
    "gdp": 2788000000000,
    "language_population": {
        "cy": {"official_status": "official_regional", "population_percent": 0.77},
        "de": {"population_percent": 6},
        "en": {"official_status": "official", "population_percent": 99},
        "fr": {"population_percent": 19},
        "gd": {
            "official_status": "official_regional",
            "population_percent": 0.099,
            "writing_percent": 5,
        },
        "sco": {"population_percent": 2.7, "writing_percent": 5},
    },
    "literacy_percent": 99,
    "measurement_system": "metric",
    "paper_size": "A4",
    "population": 64430400,
    "telephone_country_code": 44,
    "temperature_measurement": "metric",
}


def _build_raw_dataset() -> dict:
    territory_info: dict = {code: None for code in EU_MEMBERS}
    territory_info.update({
        "GB": GB_INFO,
        "PT": {
            "population": 10833800,
            "currency": {"PTE": {"from": "1911-05-22", "to": "2002-02-28"}, "EUR": {"from": "1999-01-01"}},
            "telephone_country_code": 351,
        },
        "DE": {"population": 80722800, "telephone_country_code": 49},
        "FR": {"population": 66836200, "telephone_country_code": 33},
        "US": {
            "population": 323995500,
            "measurement_system": "US",
            "paper_size": "US-Letter",
            "telephone_country_code": 1,
        },
    })
    return {
        "containment": {
            "001": ["150", "019"],
            "150": ["154", "155"],
            "154": ["GB", "IE", "DK"],
            "155": ["DE", "FR"],
            "019": ["US"],
            "EU": list(EU_MEMBERS),
            "UN": ["US", "GB", "PT", "FR", "DE"],
        },
        "locales": {
            "en": {
                "GB": "United Kingdom",
                "PT": "Portugal",
                "US": "United States",
                "DE": "Germany",
                "FR": "France",
                "IE": "Ireland",
                "DK": "Denmark",
                "001": "World",
                "150": "Europe",
                "154": "Northern Europe",
                "155": "Western Europe",
                "019": "Americas",
                "EU": "European Union",
                "UN": "United Nations",
                "HK-alt-short": "Hong Kong",
            },
            "pt": {
                "GB": "Reino Unido",
                "PT": "Portugal",
                "US": "Estados Unidos",
                "DE": "Alemanha",
                "FR": "França",
                "IE": "Irlanda",
                "001": "Mundo",
                "150": "Europa",
                "154": "Europa Setentrional",
                "155": "Europa Ocidental",
                "019": "Américas",
                "EU": "União Europeia",
                "UN": "Nações Unidas",
            },
        },
        "territory_info": territory_info,
    }


@pytest.fixture
def raw_dataset() -> dict:
    return _build_raw_dataset()


@pytest.fixture
def dataset(raw_dataset) -> TerritoryDataset:
    return TerritoryDataset.model_validate(raw_dataset)


@pytest.fixture
def settings() -> Settings:
    """Settings with library defaults, ignoring env vars and .env files."""
    return Settings(
        _env_file=None,
        DEFAULT_LOCALE="en",
        STRICT_TRANSLATION=False,
        VALIDATE_CONTAINMENT=True,
    )


@pytest.fixture
def service(dataset, settings) -> TerritoryService:
    return TerritoryService(
        dataset,
        settings=settings,
    )


@pytest.fixture(autouse=True)
def _clear_current_locale():
    """Keep context-local locale overrides from leaking between tests."""
    set_current_locale(None)
    yield
    set_current_locale(None)


@pytest.fixture
def gb_info() -> dict:
    return dict(GB_INFO)
