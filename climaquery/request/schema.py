"""Climate data request models.

A `DataRequest` is the exact payload handed to the climate data store. Values are strings as the
store expects them (e.g. `month="03"`, `area=["48.9", "2.3", "48.8", "2.4"]`).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from climaquery.intent.schema import ClimateVariable

DEFAULT_DATASET_NAME = "reanalysis-era5-single-levels"


class DataFormat(StrEnum):
    """Result file formats supported by the data store."""

    grib = "grib"
    netcdf = "netcdf"


class DataRequestOptions(BaseModel):
    """Dataset query options. There is deliberately no hour/time field (daily granularity)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    variable: ClimateVariable
    product_type: Literal["reanalysis"] = "reanalysis"
    grid: tuple[str, str]
    # [north, west, south, east]
    area: tuple[str, str, str, str]
    year: str = Field(pattern=r"^\d{4}$")
    month: str = Field(pattern=r"^\d{2}$")
    day: str = Field(pattern=r"^\d{2}$")
    format: DataFormat = DataFormat.grib


class DataRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    dataset_name: str
    options: DataRequestOptions


class ResultLink(BaseModel):
    """A link returned by the data store (submitted job, resolved result)."""

    model_config = ConfigDict(frozen=True)

    link: str
