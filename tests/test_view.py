import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_dashboard.report import Report
from site_dashboard.view import Tier, map_report_to_view

ROOT = Path(__file__).resolve().parents[1]
DATA = ROOT / "tests" / "data" / "scrapedData.json"


def _payload():
    with DATA.open(encoding="utf-8") as f:
        return json.load(f)


def test_end_to_end_example():
    view = map_report_to_view(_payload())

    first = view.summary_metrics[0]
    assert (first.label, first.value, first.tier) == ("Total Links", 10, Tier.EXCELLENT)

    chart = view.element_chart
    assert chart.series.values[chart.category_labels.index("Links")] == 10


def test_summary_metrics_order_values_and_tiers():
    view = map_report_to_view(_payload())
    got = [(m.label, m.value, m.tier.value) for m in view.summary_metrics]
    assert got == [
        ("Total Links", 10, "excellent"),
        ("Total Buttons", 2, "good"),
        ("Total Paragraphs", 5, "average"),
        ("Total Images", 3, "good"),
        ("Performance Score", 90, "excellent"),
        ("Accessibility Score", 80, "good"),
        ("Best Practices Score", 70, "average"),
        ("SEO Score", 60, "poor"),
    ]


def test_tiers_ignore_values():
    p = _payload()
    p["lighthouseReport"]["seo"] = 100
    p["elementCounts"]["links"] = 0
    view = map_report_to_view(p)
    by_label = {m.label: m for m in view.summary_metrics}
    assert by_label["SEO Score"].tier is Tier.POOR
    assert by_label["SEO Score"].value == 100
    assert by_label["Total Links"].tier is Tier.EXCELLENT


def test_element_chart():
    chart = map_report_to_view(_payload()).element_chart
    assert chart.kind == "doughnut"
    assert chart.category_labels == ("Links", "Buttons", "Paragraphs", "Images")
    assert chart.series.values == (10, 2, 5, 3)
    assert len(set(chart.series.fill_colors)) == 4
    assert chart.series.fill_colors[0] == "rgba(255,99,132,0.2)"
    assert chart.series.stroke_colors[0] == "rgba(255,99,132,1)"


def test_lighthouse_chart_uniform_colour():
    chart = map_report_to_view(_payload()).lighthouse_chart
    assert chart.kind == "radar"
    assert chart.category_labels == ("Performance", "Accessibility", "Best Practices", "SEO")
    assert chart.series.values == (90, 80, 70, 60)
    assert set(chart.series.fill_colors) == {"rgba(75,192,192,0.2)"}
    assert set(chart.series.stroke_colors) == {"rgba(75,192,192,1)"}
    assert len(chart.series.fill_colors) == 4


def test_chartjs_config():
    cfg = map_report_to_view(_payload()).lighthouse_chart.to_chartjs()
    assert cfg["type"] == "radar"
    assert cfg["options"] == {"responsive": True}
    ds = cfg["data"]["datasets"][0]
    assert ds["label"] == "Lighthouse Scores"
    assert ds["data"] == [90, 80, 70, 60]
    assert ds["borderWidth"] == 1


def test_images_pass_through():
    view = map_report_to_view(_payload())
    assert [(i.description, i.url) for i in view.images] == [
        ("Hero banner", "https://example.com/img/hero.jpg"),
        ("Team <photo>", "https://example.com/img/team.png"),
    ]


@pytest.mark.parametrize("images", ["absent", None, []])
def test_missing_images_means_empty_gallery(images):
    p = _payload()
    if images == "absent":
        del p["images"]
    else:
        p["images"] = images
    assert map_report_to_view(p).images == ()


def test_screenshot_and_element_summary():
    view = map_report_to_view(_payload())
    assert view.screenshot.data_uri.startswith("data:image/jpeg;base64,/9j/")
    assert [m.label for m in view.element_summary] == [
        "Total Links", "Total Buttons", "Total Paragraphs", "Total Images",
    ]


def test_accepts_parsed_report():
    report = Report.model_validate(_payload())
    assert map_report_to_view(report).page_title == "Example"


def test_missing_required_section_aborts_whole_view():
    p = _payload()
    del p["lighthouseReport"]
    with pytest.raises(ValidationError, match="lighthouseReport"):
        map_report_to_view(p)


def test_missing_nested_field_names_path():
    p = _payload()
    del p["lighthouseReport"]["bestPractices"]
    with pytest.raises(ValidationError, match=r"lighthouseReport\.bestPractices"):
        Report.model_validate(p)


def test_non_numeric_count_rejected():
    p = _payload()
    p["elementCounts"]["buttons"] = True
    with pytest.raises(ValidationError, match="elementCounts.buttons"):
        Report.model_validate(p)


@pytest.mark.parametrize("images", [{}, "", 0])
def test_non_list_images_rejected(images):
    p = _payload()
    p["images"] = images
    with pytest.raises(ValidationError, match="images"):
        Report.model_validate(p)


def test_scores_keep_their_type():
    p = _payload()
    p["lighthouseReport"]["performance"] = 92.5
    report = Report.model_validate(p)
    assert report.lighthouse.performance == 92.5
    assert type(report.lighthouse.seo) is int
