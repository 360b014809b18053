"""
Record models for lifelist-ingest.

- Observation: one normalized sighting (species, date, location).
- Profile: run metadata nested under the envelope's ``profile`` key.
- OutputEnvelope: the top-level document consumed by the visualization.

All models are frozen: they are built once per pipeline run and never
mutated afterwards. Attribute names are snake_case; the JSON document uses
the camelCase aliases (``sciName``, ``lastSync``, ``exportedAt``), so
always dump with ``by_alias=True`` (``to_json()`` does this for you).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Observation(BaseModel):
    """One normalized life-list row."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(..., description="Observation date, YYYY-MM-DD")
    sci_name: str = Field(..., alias="sciName")
    common: str
    location: str
    region: str = Field(..., description="Subnational region code, e.g. 'US-NY'")


class Profile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    last_sync: str = Field(..., alias="lastSync")


class OutputEnvelope(BaseModel):
    """Top-level output document.

    ``observations`` is ordered ascending by date. ``profile.last_sync``
    and ``exported_at`` are captured separately and may differ slightly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    profile: Profile
    observations: tuple[Observation, ...] = ()
    exported_at: str = Field(..., alias="exportedAt")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
