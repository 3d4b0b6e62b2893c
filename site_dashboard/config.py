#site_dashboard/config.py
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from site_dashboard.render import CHART_JS_URL

DEFAULT_SOURCE = "/scrapedData.json"


@dataclass
class DashboardConfig:
    source: str = DEFAULT_SOURCE
    base_url: Optional[str] = None
    out: str = "report"
    timeout: int = 25
    chart_js_url: str = CHART_JS_URL
    image_max_width: int = 300
    screenshot_max_width: int = 600
    retries: int = 0

    @classmethod
    def from_yaml(cls, path):
        """Read a config file; a missing file just means defaults."""
        p = Path(path)
        if not p.exists():
            return cls()
        with open(p, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"{p}: expected a mapping at top level")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in cfg.items() if k in known})

    def with_env(self, environ=None):
        env = os.environ if environ is None else environ
        updates = {}
        for var, name in (("DASHBOARD_SOURCE", "source"),
                          ("DASHBOARD_BASE_URL", "base_url"),
                          ("DASHBOARD_OUT", "out")):
            if env.get(var):
                updates[name] = env[var]
        return replace(self, **updates)

    def with_overrides(self, **kw):
        # argparse leaves unset flags as None
        return replace(self, **{k: v for k, v in kw.items() if v is not None})
