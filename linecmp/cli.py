"""
linecmp command line - find common or different lines between files
"""

from __future__ import annotations

import argparse
import sys

from linecmp.errors import ReadError, UsageError
from linecmp.models.display import CompareMode, DisplayConfig
from linecmp.models.lines import LabeledLineSet
from linecmp.services.config_manager import ConfigManager
from linecmp.services.line_loader import LineLoader
from linecmp.services.result_formatter import ResultFormatter
from linecmp.services.set_engine import SetEngine

EPILOG = """\
Examples:
  linecmp file1.txt file2.txt                # Show lines common to both files
  linecmp file1.txt file2.txt file3.txt      # Show lines common to all 3 files
  linecmp --diff file1.txt file2.txt         # Show lines unique to each file
  linecmp -d -l 50 a.txt b.txt c.txt         # Unique and partially shared lines, 50 per section
  linecmp -d -f file1.txt file2.txt          # Show every unique line
"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting"""

    def error(self, message):
        raise UsageError(message)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"limit must be a positive integer, got {number}")
    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="linecmp",
        description="Finds common or different lines between multiple files",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--diff", action="store_true", help="show different lines instead of common lines")
    parser.add_argument("-f", "--full", action="store_true", default=None, help="show all lines without truncation")
    parser.add_argument(
        "-l",
        "--limit",
        type=positive_int,
        metavar="N",
        help="maximum lines shown per section (default: 20, or the configured value)",
    )
    parser.add_argument("--json", action="store_true", help="print the full result as JSON instead of a report")
    parser.add_argument("--verbose", action="store_true", help="print load progress to stderr")
    parser.add_argument("--config", metavar="PATH", help="config file with display defaults")
    parser.add_argument("files", nargs="*", metavar="FILE")
    return parser


def resolve_display(args: argparse.Namespace, config_manager: ConfigManager) -> DisplayConfig:
    """Command line flags win over configured defaults"""
    mode = CompareMode.DIFFERENT if args.diff else CompareMode.COMMON
    overrides = {}
    if args.full is not None:
        overrides["show_full"] = args.full
    if args.limit is not None:
        overrides["max_lines"] = args.limit
    return config_manager.display_defaults(mode, **overrides)


def emit(text: str, stream=None):
    """Write report text, turning surrogate-escaped input bytes back into raw bytes"""
    stream = stream or sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return
    stream.flush()
    buffer.write(text.encode(stream.encoding or "utf-8", "surrogateescape"))
    buffer.flush()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        if len(args.files) < 2:
            raise UsageError("At least 2 files are required")
    except UsageError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    config_manager = ConfigManager(args.config) if args.config else ConfigManager.get_instance()
    display = resolve_display(args, config_manager)

    def report_loaded(line_set: LabeledLineSet):
        print(f"[linecmp] Loaded {len(line_set)} distinct lines from {line_set.label}", file=sys.stderr)

    try:
        sets = LineLoader().load_all(args.files, on_load=report_loaded if args.verbose else None)
    except ReadError as e:
        print(e, file=sys.stderr)
        return 1

    result = SetEngine().compare(sets)

    formatter = ResultFormatter()
    emit(formatter.to_json(result) if args.json else formatter.render(result, display))
    return 0


if __name__ == "__main__":
    sys.exit(main())
