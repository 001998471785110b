from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from hide_dated.config import ScanConfig, load_settings
from hide_dated.exceptions import HideDatedError
from hide_dated.fetch import FetcherClient
from hide_dated.match import find_date
from hide_dated.scan import ObservedDocument, ScanDriver
from hide_dated.utils import is_http_url, page_path, parse_html, read_text

log = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(levelname)s %(name)s %(message)s",
            stream=sys.stderr,
        )


def _load_source(source: str) -> str:
    if is_http_url(source):
        with FetcherClient() as client:
            return client.fetch_html(source).text()
    return read_text(source)


def _write(out_path: str | None, text: str, out: TextIO) -> None:
    if out_path and out_path != "-":
        with open(out_path, "w", encoding="utf-8") as fh:
            fh.write(text)
        return
    out.write(text)
    if not text.endswith("\n"):
        out.write("\n")


def _report_dict(driver: ScanDriver) -> dict[str, Any]:
    r = driver.report
    return {
        "path": driver.path,
        "suppressed": driver.suppressed(),
        "batches": driver.batches,
        "candidates": r.candidates,
        "evaluated": r.evaluated,
        "skipped": r.skipped,
        "dated": r.dated,
        "hidden": r.hidden,
        "dated_titles": r.dated_titles,
    }


def _cmd_filter(args: argparse.Namespace, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    settings = load_settings()
    config = ScanConfig(
        min_length=args.min_length if args.min_length is not None else settings.scan.min_length,
        max_length=args.max_length if args.max_length is not None else settings.scan.max_length,
        detail_path_marker=settings.scan.detail_path_marker,
        processed_attr=settings.scan.processed_attr,
    )

    html = _load_source(args.source)
    path = args.path if args.path is not None else page_path(args.source)

    observed = ObservedDocument(parse_html(html))
    driver = ScanDriver(observed.document, path, config=config).start(observed.feed)

    # Each --append file arrives as one insertion batch, like a page of
    # infinite scroll.
    for fragment_path in args.append or []:
        parent = observed.document.select_one(args.into) or observed.document
        observed.insert_html(parent, read_text(fragment_path))

    log.info(
        "Filtered %s: %d dated, %d hidden",
        args.source,
        driver.report.dated,
        driver.report.hidden,
    )

    if args.json:
        _write(args.output, json.dumps(_report_dict(driver), ensure_ascii=False, indent=2), out)
    else:
        _write(args.output, str(observed.document), out)
    return 0


def _cmd_check(args: argparse.Namespace, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    rows: list[dict[str, Any]] = []
    for text in args.texts:
        m = find_date(text)
        rows.append(
            {
                "text": text,
                "match": m.text if m else None,
                "year": m.year if m else None,
                "month": m.month if m else None,
                "day": m.day if m else None,
                "valid": bool(m and m.valid),
            }
        )

    if args.json:
        out.write(json.dumps(rows, ensure_ascii=False, indent=2) + "\n")
        return 0

    for row in rows:
        if row["match"] is None:
            out.write(f"no-date\t{row['text']}\n")
        else:
            label = "dated" if row["valid"] else "invalid"
            ymd = f"{row['year']:04d}-{row['month']:02d}-{row['day']:02d}"
            out.write(f"{label}\t{ymd}\t{row['text']}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hide-dated",
        description="Hide listing entries whose titles carry a full calendar date.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: HIDE_DATED_LOG_LEVEL or INFO).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser(
        "filter",
        help="Hide dated entries in an HTML listing (file, '-' for stdin, or URL).",
    )
    filter_parser.add_argument("source", help="HTML file path, '-' or an http(s) URL.")
    filter_parser.add_argument(
        "--path",
        default=None,
        help="Page path used for detail-page suppression (default: the URL path, or '/').",
    )
    filter_parser.add_argument(
        "--append",
        action="append",
        metavar="FRAGMENT",
        help="HTML fragment file inserted after the initial scan (repeatable, one batch each).",
    )
    filter_parser.add_argument(
        "--into",
        default="body",
        help="CSS selector of the element fragments are appended to (default: body).",
    )
    filter_parser.add_argument("--min-length", type=int, default=None)
    filter_parser.add_argument("--max-length", type=int, default=None)
    filter_parser.add_argument("-o", "--output", default=None, help="Write here instead of stdout.")
    filter_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON scan report instead of the filtered HTML.",
    )
    filter_parser.set_defaults(func=_cmd_filter)

    check_parser = subparsers.add_parser(
        "check",
        help="Show the date (if any) each text would be classified by.",
    )
    check_parser.add_argument("texts", nargs="+")
    check_parser.add_argument("--json", action="store_true")
    check_parser.set_defaults(func=_cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging((args.log_level or load_settings().log_level).upper())

    func = getattr(args, "func", None)
    if func is None:
        parser.error("no command specified")
        return 1

    try:
        return int(func(args))
    except HideDatedError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except ValueError as exc:
        # bad length bounds or malformed env config
        sys.stderr.write(f"error: {exc}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
