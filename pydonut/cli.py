"""Command-line interface for pydonut.

Usage:
    pydonut render <file> --output <chart.html>
    pydonut layout <file>
    pydonut --version
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from pydonut import ChartConfig, __version__, layout, render, sections_from_frame
from pydonut.config import LEGEND_PLACEMENTS


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", type=str, help="Path to the data file (CSV, JSON or Parquet)")
    parser.add_argument(
        "--value", type=str, default="value", help="Column holding section values (default: value)"
    )
    parser.add_argument("--label", type=str, default=None, help="Column holding section labels")
    parser.add_argument("--color", type=str, default=None, help="Column holding section colors")
    parser.add_argument(
        "--total", type=float, default=None, help="Value of the full ring (default: sum of values)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pydonut",
        description="pydonut - Proportional ring charts from tabular data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pydonut render budget.csv --output chart.html --label name --legend
  pydonut render budget.csv -o chart.html --total 1000 --start-angle 90
  pydonut layout budget.csv
  pydonut layout budget.csv --output arcs.json
        """,
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"pydonut {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        help="Render an HTML ring chart",
        description="Lay out the sections of a dataset and write the chart as HTML.",
    )
    _add_source_arguments(render_parser)
    render_parser.add_argument(
        "--output", "-o", type=str, required=True, help="Output path for the HTML chart"
    )
    render_parser.add_argument("--size", type=float, default=None, help="Ring size (default: 250)")
    render_parser.add_argument("--unit", type=str, default=None, help="Size unit (default: px)")
    render_parser.add_argument(
        "--thickness", type=float, default=None, help="Ring thickness in percent (default: 20)"
    )
    render_parser.add_argument("--text", type=str, default=None, help="Center label")
    render_parser.add_argument(
        "--legend", dest="has_legend", action="store_true", help="Render the legend"
    )
    render_parser.add_argument(
        "--legend-placement",
        type=str,
        choices=LEGEND_PLACEMENTS,
        default=None,
        help="Side of the legend (default: top)",
    )
    render_parser.add_argument(
        "--start-angle", type=float, default=None, help="Rotation of the layout in degrees"
    )
    render_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress progress output"
    )

    # Layout command
    layout_parser = subparsers.add_parser(
        "layout",
        help="Output the arc layout as JSON",
        description="Lay out the sections of a dataset and output the arcs as JSON.",
    )
    _add_source_arguments(layout_parser)
    layout_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output path for JSON (default: stdout)"
    )

    return parser


def load_data(file_path: str):
    """Load a DataFrame from a CSV, JSON or Parquet file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is not supported.
    """
    import pandas as pd

    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        return pd.read_csv(file_path)
    elif suffix == ".parquet":
        return pd.read_parquet(file_path)
    elif suffix == ".json":
        return pd.read_json(file_path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use CSV, Parquet, or JSON.")


def _load_sections(args: argparse.Namespace):
    df = load_data(args.file)
    return sections_from_frame(df, value=args.value, label=args.label, color=args.color)


def cmd_render(args: argparse.Namespace) -> int:
    """Execute the render command."""
    if not args.quiet:
        print(f"Loading data from: {args.file}")

    try:
        sections = _load_sections(args)
    except (FileNotFoundError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        config = ChartConfig.from_options(args)
        chart = render(sections, config=config, total=args.total)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        chart.save_html(args.output)
    except OSError as e:
        print(f"Error saving chart: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Chart with {len(chart.arcs)} arcs saved to: {args.output}")

    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    """Execute the layout command."""
    try:
        sections = _load_sections(args)
        arcs = layout(sections, total=args.total)
    except (FileNotFoundError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    arcs_json = [asdict(arc) for arc in arcs]

    if args.output:
        try:
            with open(args.output, "w") as f:
                json.dump(arcs_json, f, indent=2)
        except OSError as e:
            print(f"Error saving arcs: {e}", file=sys.stderr)
            return 1
    else:
        print(json.dumps(arcs_json, indent=2))

    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "layout":
        return cmd_layout(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
