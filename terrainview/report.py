from __future__ import annotations

from html import escape
from typing import Iterable, List
from urllib.parse import quote

from .pipeline import RenderResult

PAGE_TEMPLATE = """<!doctype html>
<html xmlns="http://www.w3.org/1999/xhtml">
\t<head>
\t\t<meta http-equiv="content-type" content="application/xhtml+xml; charset=UTF-8" />
\t</head>
\t<body>
{body}
\t</body>
</html>
"""


def image_link(result: RenderResult, base_url: str) -> str:
    return base_url + quote(result.output_name, safe="")


def describe(result: RenderResult) -> List[str]:
    header = result.header
    parts = [
        f"Seed: {header.seed}",
        f"Scale: {header.scale}",
        f"X: {header.origin_x} - {result.extents.end_x}",
    ]
    if header.origin_z is not None:
        parts.append(f"Z: {header.origin_z} - {result.extents.end_z}")
    return parts


def render_fragment(result: RenderResult, base_url: str = "") -> str:
    """One link per converted heightmap; all text is HTML-escaped."""
    href = escape(image_link(result, base_url), quote=True)
    label = " - ".join(escape(part) for part in describe(result))
    return f'<div><a target="_new" href="{href}">{label}</a></div>'


def render_page(fragments: Iterable[str]) -> str:
    body = "\n".join("\t\t" + fragment for fragment in fragments)
    return PAGE_TEMPLATE.format(body=body)
