#site_dashboard/render.py
"""HTML rendering of a LoadState with Jinja2 + Chart.js."""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from site_dashboard.loader import LoadState, LoadStatus
from site_dashboard.view import ChartDataset, DashboardView, map_report_to_view

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4.4.0/dist/chart.umd.min.js"
DEFAULT_CHART_KINDS = ("doughnut", "radar")


class RenderError(RuntimeError):
    pass


@dataclass
class RenderContext:
    """
    Everything the page renderer needs besides the data.

    Chart kinds have to be registered on the context before a chart of
    that kind can be drawn; nothing is registered process-wide.
    """

    chart_js_url: str = CHART_JS_URL
    image_max_width: int = 300
    screenshot_max_width: int = 600
    chart_kinds: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def default(cls, **kw) -> "RenderContext":
        return cls(**kw).register(*DEFAULT_CHART_KINDS)

    def register(self, *kinds: str) -> "RenderContext":
        self.chart_kinds = frozenset(self.chart_kinds) | set(kinds)
        return self

    def chart_config(self, chart: ChartDataset) -> Dict:
        if chart.kind not in self.chart_kinds:
            raise RenderError(
                f"chart type '{chart.kind}' is not registered "
                f"(registered: {', '.join(sorted(self.chart_kinds)) or 'none'})"
            )
        return chart.to_chartjs(responsive=True)


def _env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
    )
    # "</" inside an inline <script> would end the block early
    env.filters["tojson_script"] = lambda v: json.dumps(v).replace("</", "<\\/")
    return env


def render_view(view: DashboardView, context: Optional[RenderContext] = None) -> str:
    ctx = context or RenderContext.default()
    charts = [
        {"id": "chartElements", "title": view.element_chart.title,
         "config": ctx.chart_config(view.element_chart)},
        {"id": "chartLighthouse", "title": view.lighthouse_chart.title,
         "config": ctx.chart_config(view.lighthouse_chart)},
    ]
    return _env().get_template("dashboard.html.j2").render(view=view, charts=charts, ctx=ctx)


def render_state(state: LoadState, context: Optional[RenderContext] = None) -> str:
    """Loading -> placeholder only, Failed -> error panel, Loaded -> whole page."""
    ctx = context or RenderContext.default()
    if state.status is LoadStatus.LOADED:
        return render_view(map_report_to_view(state.report), ctx)
    if state.status is LoadStatus.FAILED:
        return _env().get_template("failed.html.j2").render(reason=state.reason, ctx=ctx)
    return _env().get_template("loading.html.j2").render(ctx=ctx)


def write_html(html: str, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
