"""Load the panchangam report and render it for the web UI."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

import requests

from .almanac import Panchangam, parse_panchangam, render_fields
from .config import Config

STATUS_ERROR = "Error loading panchangam data. Check console."


class SourceError(Exception):
    """The report could not be retrieved (missing file, HTTP error, ...)."""


@dataclass
class RenderResult:
    """Outcome of one render pass used by the web page and API."""
    ok: bool
    status: str
    source: str
    fields: Dict[str, str] = field(default_factory=dict)


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class PanchangamService:
    """Owns the report location and turns it into display fields on demand.

    The report is retrieved and parsed once per render (i.e. once per page
    load); nothing is cached between renders.
    """

    def __init__(self, source: Optional[str] = None) -> None:
        """Create a service.

        Args:
          source: File path or http(s) URL; defaults to `Config.SOURCE`.
        """
        self.config = Config
        self.source = source if source is not None else self.config.SOURCE

    @property
    def source_name(self) -> str:
        """Short name of the source for status text."""
        if _is_url(self.source):
            return self.source.rstrip("/").rsplit("/", 1)[-1] or self.source
        return os.path.basename(self.source)

    # Public API
    def load_text(self) -> str:
        """Retrieve the report text.

        Raises:
          SourceError: If the file cannot be read or the URL does not answer
            with a 2xx status.
        """
        if _is_url(self.source):
            try:
                res = requests.get(self.source, timeout=self.config.FETCH_TIMEOUT_SEC)
                res.raise_for_status()
            except requests.RequestException as e:
                raise SourceError(f"Could not load {self.source}: {e}") from e
            res.encoding = self.config.ENCODING  # ignore the header-derived charset
            return res.text
        try:
            with open(self.source, "r", encoding=self.config.ENCODING) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError(f"Could not load {self.source}: {e}") from e

    def load(self) -> Panchangam:
        """Retrieve and parse the report."""
        text = self.load_text()
        return parse_panchangam(text)

    def render(self, now: Optional[datetime] = None) -> RenderResult:
        """Load the report and render display fields for `now` (local clock by default).

        Retrieval failures are reported once via the result status; no retry.
        """
        try:
            panchangam = self.load()
        except SourceError as e:
            print(f"[panchangam] {e}", flush=True)
            return RenderResult(ok=False, status=STATUS_ERROR, source=self.source)
        if now is None:
            now = datetime.now()
        print(f"[panchangam] Loaded {self.source} ({len(panchangam.days)} days)", flush=True)
        return RenderResult(
            ok=True,
            status=f"Panchangam loaded from {self.source_name}",
            source=self.source,
            fields=render_fields(panchangam, now),
        )
