# src/task_widget/widget/markup.py

from __future__ import annotations

"""
HTML emission for the widget.

Produces a fragment rooted at #taskwarrior-widget-container. Hosts that load
a file rather than a fragment can wrap it with wrap_page().
"""

from html import escape

from .widget_models import DisplayTask, FormatterConfig

CONTAINER_ID = "taskwarrior-widget-container"

CONTAINER_STYLE = """\
#taskwarrior-widget-container {
    position: absolute;
    left: 30px;
    top: 30px;
    font-family: Helvetica Neue, Helvetica, sans-serif;
    font-size: 10pt;
    font-weight: 400;
    background: rgba(0, 0, 0, 0.5);
    border-radius: 7px;
    padding: 5px;
}
#taskwarrior-widget-container .num { text-align: right; }
#taskwarrior-widget-container .error { color: rgba(255, 100, 100, 1.00); }
"""

PAGE_SHELL = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta http-equiv="refresh" content="__REFRESH__" />
<title>__TITLE__</title>
<style>
__STYLE__</style>
</head>
<body>
__BODY__
</body>
</html>
"""


def _text(value) -> str:
    if value is None:
        return ""
    return escape(str(value))


def _stylesheet_link(href: str | None) -> str:
    if not href:
        return ""
    return f'<link rel="stylesheet" type="text/css" href="{escape(href, quote=True)}" />'


def _container(*parts: str) -> str:
    body = "\n".join(p for p in parts if p)
    return f'<div id="{CONTAINER_ID}">\n{body}\n</div>'


def render_table(tasks: list[DisplayTask], config: FormatterConfig) -> str:
    colours = config.colours
    header = (
        f'<tr class="header" style="color: {colours.header.rgba()}">'
        f'<th class="star">{_text(config.started_indicator)}</th>'
        '<th class="num">ID</th>'
        '<th class="num">DUE</th>'
        "<th>DESCRIPTION</th>"
        "<th>PROJECT</th>"
        f'<th style="color: {colours.tags.rgba(1.0)}">TAGS</th>'
        '<th class="num">URG</th>'
        "</tr>"
    )

    rows: list[str] = []
    for task in tasks:
        colour = task.colour or colours.for_bucket(task.bucket).with_alpha(1.0)
        # The started glyph sits in the row and inherits the row colour.
        rows.append(
            f'<tr style="color: {colour.rgba()}">'
            f'<td class="star">{_text(task.start_marker)}</td>'
            f'<td class="num">{_text(task.id)}</td>'
            f'<td class="num">{_text(task.due_label)}</td>'
            f"<td>{_text(task.description)}</td>"
            f"<td>{_text(task.project)}</td>"
            f'<td style="color: {colours.tags.rgba(colour.a)}">{_text(task.tags)}</td>'
            f'<td class="num">{_text(task.urgency_text)}</td>'
            "</tr>"
        )

    table = (
        "<table>\n"
        f"<thead>\n{header}\n</thead>\n"
        "<tbody>\n" + "\n".join(rows) + ("\n" if rows else "") + "</tbody>\n"
        "</table>"
    )
    return _container(_stylesheet_link(config.stylesheet_href), table)


def render_empty() -> str:
    return _container("<p><strong>No tasks found.</strong></p>")


def render_error(message: str) -> str:
    return _container(f'<p><strong class="error">Error: {_text(message)}.</strong></p>')


def wrap_page(fragment: str, *, title: str = "Tasks", refresh_seconds: float | None = None) -> str:
    """Standalone HTML page around a widget fragment (for hosts that load a file)."""
    refresh = "" if not refresh_seconds else str(max(1, int(refresh_seconds)))
    page = PAGE_SHELL
    if not refresh:
        page = page.replace('<meta http-equiv="refresh" content="__REFRESH__" />\n', "")
    return (
        page.replace("__REFRESH__", refresh)
        .replace("__TITLE__", escape(title))
        .replace("__STYLE__", CONTAINER_STYLE)
        .replace("__BODY__", fragment)
    )
