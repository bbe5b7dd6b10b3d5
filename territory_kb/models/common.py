"""Shared enums and the base model used across territory models."""

from enum import StrEnum

from pydantic import BaseModel

# --- Shared enums ---


class OfficialStatus(StrEnum):
    """Official status of a language within a territory."""

    OFFICIAL = "official"
    DE_FACTO_OFFICIAL = "de_facto_official"
    OFFICIAL_REGIONAL = "official_regional"
    OFFICIAL_MINORITY = "official_minority"


class MeasurementSystem(StrEnum):
    """Measurement conventions declared for a territory."""

    METRIC = "metric"
    US = "US"
    UK = "UK"


class PaperSize(StrEnum):
    """Default paper size declared for a territory."""

    A4 = "A4"
    US_LETTER = "US-Letter"


# --- Base model ---


class TerritoryBase(BaseModel):
    """Base model with common configuration for all territory models.

    Models are frozen: everything is built once from the dataset and never
    mutated afterwards.
    """

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
        "frozen": True,
    }
