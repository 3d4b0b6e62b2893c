#site_dashboard/write_out.py
import pandas as pd
from pathlib import Path

from site_dashboard.view import DashboardView


def _summary_frame(view: DashboardView) -> pd.DataFrame:
    return pd.DataFrame([
        {"Label": m.label, "Value": m.value, "Tier": m.tier.value}
        for m in view.summary_metrics
    ])


def _chart_frame(chart) -> pd.DataFrame:
    return pd.DataFrame({
        "Category": list(chart.category_labels),
        "Value": list(chart.series.values),
    })


def write_csvs(view: DashboardView, out_dir: Path | str):
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    _summary_frame(view).to_csv(out_dir / "summary.csv", index=False)

    charts = []
    for chart in (view.element_chart, view.lighthouse_chart):
        df = _chart_frame(chart)
        df.insert(0, "Chart", chart.title)
        charts.append(df)
    pd.concat(charts, ignore_index=True).to_csv(out_dir / "charts.csv", index=False)


def write_xlsx(view: DashboardView, xlsx_path: Path | str):
    xlsx_path = Path(xlsx_path)
    xlsx_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(xlsx_path, engine="openpyxl") as xl:
        _summary_frame(view).to_excel(xl, index=False, sheet_name="summary")
        _chart_frame(view.element_chart).to_excel(xl, index=False, sheet_name="elements")
        _chart_frame(view.lighthouse_chart).to_excel(xl, index=False, sheet_name="lighthouse")
