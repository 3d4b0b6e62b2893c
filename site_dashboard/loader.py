#site_dashboard/loader.py
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional
import urllib.parse

import requests
from pydantic import ValidationError

from site_dashboard.report import Report


class LoadStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadState:
    status: LoadStatus
    report: Optional[Report] = None
    reason: str = ""

    @classmethod
    def loading(cls):
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, report: Report):
        return cls(LoadStatus.LOADED, report=report)

    @classmethod
    def failed(cls, reason: str):
        return cls(LoadStatus.FAILED, reason=reason)


def _is_http(src: str) -> bool:
    s = urllib.parse.urlsplit(src).scheme.lower()
    return s in ("http", "https")


class ReportLoader:
    """
    Reads scrapedData.json once and holds the result as a LoadState.

    `source` is an http(s) URL (one plain GET) or a local file path.
    Failures end in FAILED; nothing is retried unless retry() is called.
    """

    def __init__(self, source, timeout=25, session=None, log=lambda *a, **k: None):
        self.source = str(source)
        self.timeout = timeout
        self.session = session
        self.log = log
        self._state = LoadState.loading()

    @property
    def state(self) -> LoadState:
        return self._state

    def _get(self, sess):
        r = sess.get(self.source, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def _read_payload(self):
        if _is_http(self.source):
            if self.session is not None:
                return self._get(self.session)
            with requests.Session() as sess:
                return self._get(sess)
        # utf-8-sig also accepts files saved with a BOM
        return json.loads(Path(self.source).read_text(encoding="utf-8-sig"))

    def load(self) -> LoadState:
        if self._state.status is not LoadStatus.LOADING:
            return self._state

        self.log(f"fetch {self.source}")
        try:
            report = Report.model_validate(self._read_payload())
        except ValidationError as e:
            self._state = LoadState.failed(f"invalid report: {e}")
        # requests' JSONDecodeError is also a RequestException, so it goes first
        except (json.JSONDecodeError, requests.exceptions.JSONDecodeError, UnicodeDecodeError) as e:
            self._state = LoadState.failed(f"malformed JSON: {e}")
        except requests.RequestException as e:
            self._state = LoadState.failed(f"request failed: {e}")
        except OSError as e:
            self._state = LoadState.failed(f"cannot read {self.source}: {e}")
        else:
            self._state = LoadState.loaded(report)

        if self._state.status is LoadStatus.FAILED:
            self.log(f"error {self.source}: {self._state.reason}")
        else:
            self.log(f"loaded {self.source} [{self._state.report.page_title}]")
        return self._state

    def retry(self) -> LoadState:
        if self._state.status is not LoadStatus.FAILED:
            raise RuntimeError(f"retry() needs a failed load, state is {self._state.status.value}")
        self._state = LoadState.loading()
        return self.load()


def resolve_source(source: str, base_url: Optional[str] = None) -> str:
    """Join a path like '/scrapedData.json' onto base_url when one is given."""
    if base_url and not _is_http(source):
        return urllib.parse.urljoin(base_url.rstrip("/") + "/", source.lstrip("/"))
    return source


def load_report(source, timeout=25, session=None, log=lambda *a, **k: None) -> LoadState:
    return ReportLoader(source, timeout=timeout, session=session, log=log).load()
