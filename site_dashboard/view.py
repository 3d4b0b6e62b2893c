#site_dashboard/view.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union

from site_dashboard.report import Report, ReportImage


class Tier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


# Card order and tier per slot. Tiers are fixed per card and do not look at
# the value (a SEO score of 100 is still "poor").
SUMMARY_SLOTS: List[Tuple[str, str, str, Tier]] = [
    ("Total Links",          "element_counts", "links",          Tier.EXCELLENT),
    ("Total Buttons",        "element_counts", "buttons",        Tier.GOOD),
    ("Total Paragraphs",     "element_counts", "paragraphs",     Tier.AVERAGE),
    ("Total Images",         "element_counts", "images",         Tier.GOOD),
    ("Performance Score",    "lighthouse",     "performance",    Tier.EXCELLENT),
    ("Accessibility Score",  "lighthouse",     "accessibility",  Tier.GOOD),
    ("Best Practices Score", "lighthouse",     "best_practices", Tier.AVERAGE),
    ("SEO Score",            "lighthouse",     "seo",            Tier.POOR),
]

ELEMENT_CATEGORIES = [
    ("Links", "links"),
    ("Buttons", "buttons"),
    ("Paragraphs", "paragraphs"),
    ("Images", "images"),
]
ELEMENT_FILLS = [
    "rgba(255,99,132,0.2)",
    "rgba(54,162,235,0.2)",
    "rgba(255,206,86,0.2)",
    "rgba(75,192,192,0.2)",
]
ELEMENT_STROKES = [
    "rgba(255,99,132,1)",
    "rgba(54,162,235,1)",
    "rgba(255,206,86,1)",
    "rgba(75,192,192,1)",
]

LIGHTHOUSE_CATEGORIES = [
    ("Performance", "performance"),
    ("Accessibility", "accessibility"),
    ("Best Practices", "best_practices"),
    ("SEO", "seo"),
]
LIGHTHOUSE_FILL = "rgba(75,192,192,0.2)"
LIGHTHOUSE_STROKE = "rgba(75,192,192,1)"


@dataclass(frozen=True)
class SummaryMetric:
    label: str
    value: float
    tier: Tier


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: Tuple[float, ...]
    fill_colors: Tuple[str, ...]
    stroke_colors: Tuple[str, ...]
    border_width: int = 1


@dataclass(frozen=True)
class ChartDataset:
    """Renderer-agnostic chart description: categories, one series, colours."""

    kind: str
    title: str
    category_labels: Tuple[str, ...]
    series: ChartSeries

    def to_chartjs(self, responsive: bool = True) -> Dict[str, Any]:
        s = self.series
        return {
            "type": self.kind,
            "data": {
                "labels": list(self.category_labels),
                "datasets": [{
                    "label": s.name,
                    "data": list(s.values),
                    "backgroundColor": list(s.fill_colors),
                    "borderColor": list(s.stroke_colors),
                    "borderWidth": s.border_width,
                }],
            },
            "options": {"responsive": responsive},
        }


@dataclass(frozen=True)
class Screenshot:
    data: str
    mime: str = "image/jpeg"

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime};base64,{self.data}"


@dataclass(frozen=True)
class DashboardView:
    page_title: str
    summary_metrics: Tuple[SummaryMetric, ...]
    element_chart: ChartDataset
    lighthouse_chart: ChartDataset
    images: Tuple[ReportImage, ...]
    screenshot: Screenshot
    element_summary: Tuple[SummaryMetric, ...] = field(default=())


def _chart(kind, title, name, section, categories, fills, strokes) -> ChartDataset:
    return ChartDataset(
        kind=kind,
        title=title,
        category_labels=tuple(label for label, _ in categories),
        series=ChartSeries(
            name=name,
            values=tuple(getattr(section, attr) for _, attr in categories),
            fill_colors=tuple(fills),
            stroke_colors=tuple(strokes),
        ),
    )


def map_report_to_view(report: Union[Report, Mapping[str, Any]]) -> DashboardView:
    if not isinstance(report, Report):
        report = Report.model_validate(report)

    metrics = tuple(
        SummaryMetric(label, getattr(getattr(report, section), attr), tier)
        for label, section, attr, tier in SUMMARY_SLOTS
    )

    element_chart = _chart(
        "doughnut", "Element Counts", "Element Counts",
        report.element_counts, ELEMENT_CATEGORIES, ELEMENT_FILLS, ELEMENT_STROKES,
    )
    n = len(LIGHTHOUSE_CATEGORIES)
    lighthouse_chart = _chart(
        "radar", "Lighthouse Report", "Lighthouse Scores",
        report.lighthouse, LIGHTHOUSE_CATEGORIES,
        [LIGHTHOUSE_FILL] * n, [LIGHTHOUSE_STROKE] * n,
    )

    return DashboardView(
        page_title=report.page_title,
        summary_metrics=metrics,
        element_chart=element_chart,
        lighthouse_chart=lighthouse_chart,
        images=tuple(report.images),
        screenshot=Screenshot(report.lighthouse.screenshot_data),
        element_summary=metrics[:len(ELEMENT_CATEGORIES)],
    )
