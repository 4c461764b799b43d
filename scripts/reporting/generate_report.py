"""Command-line entry point for generating the TCS log report.

Usage:
    python -m reporting.generate_report --data report.json --output log.html \
        [--config viewer.yaml] [--log-file report.log] [--json payload.json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add scripts directory to path for imports
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent)
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from ingestion.load_report import load_report_data  # noqa: E402
from reporting.html_report import generate_html_report  # noqa: E402
from reporting.json_report import (  # noqa: E402
    compute_report_checksum,
    generate_json_report,
    serialize_report,
)
from validators import ValidationError  # noqa: E402
from viewer import load_viewer_config  # noqa: E402


def generate_reports(
    data_path: str,
    output_html: str,
    config_path: str | None = None,
    output_json: str | None = None,
) -> None:
    """Load the payload and write the HTML report (and optionally the JSON payload).

    Raises:
        ValidationError: If the config or payload is invalid
    """
    log = logging.getLogger(__name__)

    config = load_viewer_config(config_path)
    data = load_report_data(data_path)
    if config.default_library is not None and not data.has_library(config.default_library):
        raise ValidationError(
            f"default_library '{config.default_library}' is not in the report. "
            f"Libraries are: {data.labels()}"
        )

    html = generate_html_report(data, config)
    Path(output_html).parent.mkdir(parents=True, exist_ok=True)
    Path(output_html).write_text(html)
    log.info("Wrote HTML report: %s", output_html)

    if output_json:
        report_json = serialize_report(generate_json_report(data))
        Path(output_json).parent.mkdir(parents=True, exist_ok=True)
        Path(output_json).write_text(report_json)
        log.info(
            "Wrote JSON payload: %s (sha256=%s)",
            output_json,
            compute_report_checksum(report_json),
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcs-log-report",
        description="Render a TCS batch log payload as a single-file HTML report.",
    )
    parser.add_argument("--data", required=True, help="Report payload JSON (main_data + lib_data)")
    parser.add_argument("--output", required=True, help="HTML report to write")
    parser.add_argument("--config", default=None, help="Viewer config YAML")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--json", default=None, help="Write the normalized JSON payload here")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on invalid input
    """
    args = build_parser().parse_args(argv)

    # Set up logging
    logging.basicConfig(
        filename=args.log_file,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    log = logging.getLogger(__name__)

    # Also log to console
    if args.log_file:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.INFO)
        log.addHandler(console)

    try:
        generate_reports(
            data_path=args.data,
            output_html=args.output,
            config_path=args.config,
            output_json=args.json,
        )
        return 0

    except ValidationError as e:
        log.error("Report generation failed: %s", e)
        return 1

    except OSError:
        log.exception("Could not read or write report files")
        return 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
