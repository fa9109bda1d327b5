from __future__ import annotations

import html
from pathlib import Path

from .schemas import EditRecord, Match, ScanResult


CSV_HEADER = "distance,keyword,fqdn-element,full-fqdn"


def format_match(m: Match) -> str:
    return f"{m.distance},{m.keyword},{m.label},{m.fqdn}"


def format_edit(e: EditRecord) -> str:
    if e.op == "ins":
        action = f"Insert {e.target}"
    elif e.op == "del":
        action = f"Delete {e.source}"
    else:
        action = f"Substitute {e.target} for {e.source}"
    return f"\t{action} at {e.position}"


def render_lines(result: ScanResult, verbose: bool = False) -> list[str]:
    lines = [CSV_HEADER]
    for m in result.matches:
        lines.append(format_match(m))
        if verbose:
            lines.extend(format_edit(e) for e in m.edits)
    return lines


def write_json(result: ScanResult, path: str | Path) -> None:
    Path(path).write_text(result.model_dump_json(indent=2), encoding="utf-8")


def _edit_span(e: EditRecord) -> str:
    if e.op == "sub":
        return f"<span class='sub'>{html.escape(e.source or '')}→{html.escape(e.target or '')}@{e.position}</span>"
    if e.op == "ins":
        return f"<span class='ins'>+{html.escape(e.target or '')}@{e.position}</span>"
    return f"<span class='del'>-{html.escape(e.source or '')}@{e.position}</span>"


def write_html(result: ScanResult, path: str | Path) -> None:
    rows = []
    for m in result.matches:
        rows.append(
            "<tr>"
            f"<td>{m.distance}</td>"
            f"<td class='mono'>{html.escape(m.keyword)}</td>"
            f"<td class='mono'>{html.escape(m.label)}</td>"
            f"<td class='mono'>{html.escape(m.fqdn)}</td>"
            f"<td class='mono'>{' '.join(_edit_span(e) for e in m.edits)}</td>"
            "</tr>"
        )

    failure_rows = []
    for f in result.failures:
        failure_rows.append(
            "<tr>"
            f"<td class='mono'>{html.escape(f.keyword)}</td>"
            f"<td class='mono'>{html.escape(f.label)}</td>"
            f"<td class='mono'>{html.escape(f.fqdn)}</td>"
            f"<td>{html.escape(f.reason)}</td>"
            "</tr>"
        )

    match_body = "".join(rows) or "<tr><td colspan='5'>(none)</td></tr>"
    failure_body = "".join(failure_rows) or "<tr><td colspan='4'>(none)</td></tr>"

    html_doc = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>Typosquat Scan Report</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, Segoe UI, Roboto, Helvetica, Arial; margin: 24px; }}
    .mono {{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 8px; vertical-align: top; }}
    th {{ background: #f7f7f7; text-align: left; }}
    .sub {{ color: #b91c1c; font-weight: 600; }}
    .ins {{ color: #0f766e; }}
    .del {{ color: #7c3aed; }}
  </style>
</head>
<body>
  <h1>Typosquat Scan Report</h1>
  <p><b>Threshold:</b> {result.threshold}</p>
  <p><b>Keywords:</b> {result.keywords} <b>FQDNs:</b> {result.fqdns_processed} <b>Comparisons:</b> {result.comparisons}</p>

  <h2>Matches</h2>
  <table>
    <thead>
      <tr>
        <th>Distance</th>
        <th>Keyword</th>
        <th>Label</th>
        <th>FQDN</th>
        <th>Edits</th>
      </tr>
    </thead>
    <tbody>
      {match_body}
    </tbody>
  </table>

  <h2>Failed comparisons</h2>
  <table>
    <thead>
      <tr><th>Keyword</th><th>Label</th><th>FQDN</th><th>Reason</th></tr>
    </thead>
    <tbody>
      {failure_body}
    </tbody>
  </table>
</body>
</html>
"""
    Path(path).write_text(html_doc, encoding="utf-8")
