"""
Load Case Generator (LCG) - Command Line Entry Point

Turns a transmission structure load case table into per-joint force rows
and a vector load case table for structural analysis software.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config.analysis_config import ProjectConfig, load_project_config
from processing import auto_map
from processing.overload_factors import OverloadFactorTable
from processing.pipeline import LoadCasePipeline
from services.export import (
    ExportWriter,
    columns_for,
    generated_row_columns,
    overload_factor_columns,
    vector_table_columns,
)
from services.export.writer import FORMATS
from services.extraction import extract_table
from services.table_io import read_table
from utils.env import is_dev_mode
from utils.error_handling import handle_operation_error
from utils.logging_utils import log_event, setup_logging
from utils.timing import PhaseTimer

logger = logging.getLogger(__name__)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _write(columns, rows, output: Path, format: Optional[str]) -> None:
    ExportWriter().write_rows(columns, rows, output, format)


def _log_phases(command: str, timer: PhaseTimer) -> None:
    log_event(
        logger,
        "cli.complete",
        f"{command} finished in {timer.total():.3f}s",
        command=command,
        phases=timer.as_list(),
    )


def _prepare_pipeline(args: argparse.Namespace, timer: PhaseTimer) -> tuple[LoadCasePipeline, ProjectConfig]:
    """Read the config and primary table, then confirm the field mapping.

    A config without a field mapping falls back to the auto-mapped headers.

    Raises:
        FileNotFoundError, ValueError: On unreadable inputs
    """
    with timer.measure("read_inputs"):
        project = load_project_config(args.config)
        table = read_table(args.table)

    pipeline = LoadCasePipeline(project.analysis)
    pipeline.load_table(table)
    mapping = project.field_mapping
    if not mapping:
        mapping = auto_map(table.headers)
        log_event(
            logger,
            "mapping.auto",
            "No field mapping configured; using auto-mapped columns",
            mapping=mapping,
        )
    pipeline.apply_mapping(mapping)

    if getattr(args, "olf", None):
        pipeline.replace_overload_factors(OverloadFactorTable.from_rows(read_table(args.olf).rows))
    return pipeline, project


def cmd_extract(args: argparse.Namespace) -> int:
    timer = PhaseTimer({"command": "extract"})
    with timer.measure("extract"):
        outcome = extract_table(args.image)
    if not outcome.ok:
        return _fail(outcome.error)
    if outcome.notice:
        print(outcome.notice)
        return 0

    try:
        with timer.measure("export"):
            _write(columns_for(outcome.table.headers), outcome.table.rows, args.output, args.format)
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Export failed", args.output))

    print(f"Extracted {len(outcome.table)} rows to {args.output}")
    _log_phases("extract", timer)
    return 0


def cmd_map(args: argparse.Namespace) -> int:
    try:
        table = read_table(args.table)
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Reading inputs failed", args.table))

    print(json.dumps({"field_mapping": auto_map(table.headers)}, indent=2))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    timer = PhaseTimer({"command": "generate"})
    try:
        pipeline, _ = _prepare_pipeline(args, timer)
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Reading inputs failed"))

    if args.write_olf:
        try:
            _write(overload_factor_columns(), pipeline.overload_factors.to_rows(), args.write_olf, None)
        except (OSError, ValueError) as e:
            return _fail(handle_operation_error(e, "Writing overload factors failed", args.write_olf))

    with timer.measure("generate"):
        result = pipeline.generate()
    if not result.ok:
        logger.debug("Generation failed: %s", result.error)
        return _fail(result.error)

    try:
        with timer.measure("export"):
            _write(
                generated_row_columns(),
                [row.as_record() for row in result.rows],
                args.output,
                args.format,
            )
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Export failed", args.output))

    print(f"Wrote {len(result.rows)} joint load rows to {args.output}")
    _log_phases("generate", timer)
    return 0


def cmd_vector(args: argparse.Namespace) -> int:
    timer = PhaseTimer({"command": "vector"})
    try:
        pipeline, project = _prepare_pipeline(args, timer)
        if args.secondary:
            pipeline.load_secondary(read_table(args.secondary))
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Reading inputs failed"))

    if project.vector is not None:
        pipeline.set_vector_config(project.vector)

    if args.from_generated:
        with timer.measure("generate"):
            result = pipeline.generate()
        if not result.ok:
            logger.debug("Generation failed: %s", result.error)
            return _fail(result.error)

    with timer.measure("vector_table"):
        rows = pipeline.build_vector_table()

    try:
        with timer.measure("export"):
            _write(vector_table_columns(), rows, args.output, args.format)
    except (OSError, ValueError) as e:
        return _fail(handle_operation_error(e, "Export failed", args.output))

    print(f"Wrote {len(rows)} vector load cases to {args.output}")
    _log_phases("vector", timer)
    return 0


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", type=Path, required=True, help="Output .csv or .xlsx file.")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: inferred from the output extension).",
    )


def _add_table_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("table", type=Path, help="Load case table (.csv, .xlsx).")
    parser.add_argument("-c", "--config", type=Path, required=True, help="Project config JSON.")
    parser.add_argument("--olf", type=Path, default=None, help="Edited overload factor table.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transmission structure load case generator.")
    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser("extract", help="Extract a table from an image.")
    extract_parser.add_argument("image", type=Path, help="Image of the load case table.")
    _add_output_args(extract_parser)
    extract_parser.set_defaults(func=cmd_extract)

    map_parser = subparsers.add_parser("map", help="Print the proposed field mapping for a table.")
    map_parser.add_argument("table", type=Path, help="Load case table (.csv, .xlsx).")
    map_parser.set_defaults(func=cmd_map)

    generate_parser = subparsers.add_parser("generate", help="Generate joint load rows.")
    _add_table_args(generate_parser)
    _add_output_args(generate_parser)
    generate_parser.add_argument(
        "--write-olf",
        type=Path,
        default=None,
        help="Also write the derived overload factor table for editing.",
    )
    generate_parser.set_defaults(func=cmd_generate)

    vector_parser = subparsers.add_parser("vector", help="Build the vector load case table.")
    _add_table_args(vector_parser)
    _add_output_args(vector_parser)
    vector_parser.add_argument("--secondary", type=Path, default=None, help="Secondary table to join.")
    vector_parser.add_argument(
        "--from-generated",
        action="store_true",
        help="Label rows with the generated load case names (includes UNFACT cases).",
    )
    vector_parser.set_defaults(func=cmd_vector)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    setup_logging(level=logging.DEBUG if is_dev_mode() else logging.INFO)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
