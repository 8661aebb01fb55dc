"""Report renderers."""

from __future__ import annotations

from pkgdeps.renderer.json_report import render_json
from pkgdeps.renderer.markdown import render_markdown

RENDERERS = {
    "markdown": render_markdown,
    "json": render_json,
}

__all__ = ["RENDERERS", "render_json", "render_markdown"]
