#site_dashboard/report.py
"""Pydantic models for scrapedData.json (camelCase on the wire)."""
from __future__ import annotations
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

# StrictInt/StrictFloat keep True/False from passing as 1/0
Score = Union[StrictInt, StrictFloat]


class _Wire(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ElementCounts(_Wire):
    links: StrictInt
    buttons: StrictInt
    paragraphs: StrictInt
    images: StrictInt


class LighthouseScores(_Wire):
    performance: Score
    accessibility: Score
    best_practices: Score = Field(alias="bestPractices")
    seo: Score
    screenshot_data: StrictStr = Field(alias="screenshotData")  # base64 image


class ReportImage(_Wire):
    description: StrictStr
    url: StrictStr


class Report(_Wire):
    """One page's scrape + Lighthouse results. Only `images` is optional."""

    page_title: StrictStr = Field(alias="pageTitle")
    element_counts: ElementCounts = Field(alias="elementCounts")
    lighthouse: LighthouseScores = Field(alias="lighthouseReport")
    images: Tuple[ReportImage, ...] = ()

    @field_validator("images", mode="before")
    @classmethod
    def images_list_or_none(cls, v: object) -> object:
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("images must be a list")
        return v
