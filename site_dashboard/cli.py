#site_dashboard/cli.py
import argparse, sys
from pathlib import Path

from site_dashboard.config import DashboardConfig
from site_dashboard.loader import LoadStatus, ReportLoader, resolve_source
from site_dashboard.render import RenderContext, render_state, write_html
from site_dashboard.view import map_report_to_view
from site_dashboard.write_out import write_csvs, write_xlsx


def main(argv=None):
    ap = argparse.ArgumentParser("site-dashboard")

    ap.add_argument("--source", default=None,
                    help="scrapedData.json URL or local path (default /scrapedData.json).")
    ap.add_argument("--base-url", default=None,
                    help="Server to resolve a path-only --source against.")
    ap.add_argument("--out", default=None)
    ap.add_argument("--config", default="config/dashboard.yaml")
    ap.add_argument("--timeout", type=int, default=None)
    ap.add_argument("--retries", type=int, default=None,
                    help="Explicit retries after a failed load (default 0).")
    ap.add_argument("--csv", action="store_true",
                    help="Also write summary.csv and charts.csv")
    ap.add_argument("--xlsx", action="store_true",
                    help="Also write workbook.xlsx")
    ap.add_argument("--verbose", action="store_true")

    args = ap.parse_args(argv)

    cfg = (
        DashboardConfig.from_yaml(args.config)
        .with_env()
        .with_overrides(
            source=args.source,
            base_url=args.base_url,
            out=args.out,
            timeout=args.timeout,
            retries=args.retries,
        )
    )

    log = print if args.verbose else (lambda *_, **__: None)

    out_dir = Path(cfg.out)
    page = out_dir / "dashboard.html"
    ctx = RenderContext.default(
        chart_js_url=cfg.chart_js_url,
        image_max_width=cfg.image_max_width,
        screenshot_max_width=cfg.screenshot_max_width,
    )

    source = resolve_source(cfg.source, cfg.base_url)
    loader = ReportLoader(source, timeout=cfg.timeout, log=log)

    # placeholder first, so a slow fetch still leaves a page behind
    write_html(render_state(loader.state, ctx), page)

    state = loader.load()
    for i in range(cfg.retries):
        if state.status is not LoadStatus.FAILED:
            break
        print(f"  retry {i + 1}/{cfg.retries}: {source}")
        state = loader.retry()

    write_html(render_state(state, ctx), page)

    if state.status is not LoadStatus.LOADED:
        print(f"Failed to load {source}: {state.reason}")
        print(f"Wrote error page → {page}")
        return 1

    view = map_report_to_view(state.report)
    print(f"Dashboard for '{view.page_title}' → {page}")
    if args.csv:
        write_csvs(view, out_dir)
    if args.xlsx:
        write_xlsx(view, out_dir / "workbook.xlsx")
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
