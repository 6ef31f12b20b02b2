"""Time chart preview CLI.

Loads a tabular query result from a JSON file and, when the query carries a
``| render timechart`` directive (or ``--force`` is given), renders it as a
braille time chart in the terminal.

Input layout::

  {"query": "T | render timechart",           # optional, --query wins
   "columns": [{"name": "Timestamp", "type": "datetime"},
               {"name": "Count", "type": "long"}],
   "rows": [["2024-01-01T00:00:00Z", 1], ...]}

Features:
 - Chart size defaults to the current terminal size (``--width/--height``).
 - ``--plain`` prints characters without color, ``--json`` emits the render
   status and metadata instead of the chart.
 - Exit code 0 when a chart was drawn, 1 when the result is not chartable,
   2 for unreadable input.

Example:
  termchart-render result.json --query "T | summarize count() by bin(ts, 1h) | render timechart"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console

from termchart.charting.surfaces import GridSurface, print_surface
from termchart.config.settings import LOG_LEVEL
from termchart.domain.models import TabularResult
from termchart.parsing.errors import ChartDataError
from termchart.services.chart_service import TimeChartService

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a query result as a terminal time chart")
    p.add_argument("result", help="JSON file holding 'columns' and 'rows' (use '-' for stdin)")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--query", help="Query text used for directive detection")
    src.add_argument("--query-file", help="Read the query text from this file")
    p.add_argument("--width", type=int, default=None, help="Chart width in cells (default: terminal width)")
    p.add_argument("--height", type=int, default=None, help="Chart height in cells (default: 20)")
    p.add_argument("--force", action="store_true", help="Chart even without a render timechart directive")
    p.add_argument("--plain", action="store_true", help="Print without colors")
    p.add_argument("--json", action="store_true", help="Emit render status/metadata as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def load_result(payload: Dict[str, Any]) -> TabularResult:
    columns = payload.get("columns")
    rows = payload.get("rows", [])
    if not isinstance(columns, list) or not isinstance(rows, list):
        raise ChartDataError("result JSON needs a 'columns' list and a 'rows' list")
    spec: List[tuple[str, str]] = []
    for col in columns:
        if isinstance(col, dict):
            spec.append((str(col.get("name", "")), str(col.get("type", "string"))))
        else:
            spec.append((str(col[0]), str(col[1])))
    return TabularResult.from_records(spec, rows)


def _read_payload(path: str) -> Dict[str, Any]:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def _resolve_query(args: argparse.Namespace, payload: Dict[str, Any]) -> Optional[str]:
    if args.query is not None:
        return args.query
    if args.query_file:
        with open(args.query_file, "r", encoding="utf-8") as fh:
            return fh.read()
    query = payload.get("query")
    return str(query) if query is not None else None


def _meta_to_dict(meta: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in meta.items():
        out[key] = getattr(value, "__dict__", value)
    return out


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        payload = _read_payload(args.result)
        if not isinstance(payload, dict):
            raise ChartDataError("result JSON must be an object")
        table = load_result(payload)
        query = _resolve_query(args, payload)
    except (OSError, ValueError, TypeError, IndexError, ChartDataError) as e:
        print(f"Cannot read result: {e}", file=sys.stderr)
        return 2

    service = TimeChartService()
    data = service.extract(table) if args.force else service.prepare(query, table)
    if data is None:
        print("Result is not chartable as a time chart", file=sys.stderr)
        return 1

    console = Console(no_color=args.plain, highlight=False)
    width = args.width or console.size.width
    height = args.height or 20
    surface = GridSurface(width, height)
    result = service.render(data, surface)
    log.debug("rendered %dx%d chart: status=%s", width, height, result.status)

    if args.json:
        payload_out = {
            "status": result.status,
            "series": [s.name for s in data.series],
            "points": data.point_count,
            "meta": _meta_to_dict(result.meta),
        }
        print(json.dumps(payload_out, ensure_ascii=False, indent=2, default=str))
    elif args.plain:
        print(surface.to_text())
    else:
        print_surface(surface, console)
    return 0 if result.drew_chart else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
