"""CLI parsing and main orchestration."""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from . import application
from . import config
from . import console as cs
from . import errors
from . import validation

console = cs.get_console()
Configuration = config.Configuration
RunOptions = application.RunOptions

EXIT_CONFIG_ERROR = 1
EXIT_RUN_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="autobase",
        description="Generate a BASE table with per-script and per-language vertical extents",
        epilog="Fonts with CJK glyphs get the fixed ideographic baseline layout; "
        "all other fonts are measured by shaping sample words.",
    )
    parser.add_argument("font_path", type=Path, help="The font to analyze")
    parser.add_argument(
        "-o", "--output", type=Path, help="Output font (default: overwrite the input)"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="PATH",
        help="TOML configuration with tolerance, languages and overrides",
    )
    parser.add_argument(
        "-k",
        "--words",
        type=int,
        default=config.DEFAULT_WORDS_PER_LIST,
        metavar="N",
        help=f"Number of words from each list to test (default: {config.DEFAULT_WORDS_PER_LIST})",
    )
    parser.add_argument(
        "-f",
        "--fea",
        action="store_true",
        help="Print AFDKO feature code instead of modifying the font",
    )
    parser.add_argument(
        "-d",
        "--descender",
        type=int,
        default=None,
        help="Ideographic em-box bottom for CJK fonts (default: derived from the glyphs)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Measure word lists in this many worker processes (default: 1)",
    )
    parser.add_argument(
        "--force-overrides",
        action="store_true",
        help="Always emit a language record that has an override, even within tolerance",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity level. Use -v for details, -vv for DEBUG level output",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )
    return parser.parse_args(argv)


def load_configuration(path: Optional[Path]) -> Configuration:
    if path is None:
        return Configuration()
    return config.load_config(path)


def main(argv: Optional[List[str]] = None) -> int:
    start_time = time.time()
    args = parse_args(argv)
    cs.configure_logging(args.verbose, args.quiet)
    validation.validate_args(args)

    # Configuration problems abort before any measurement work
    try:
        configuration = load_configuration(args.config)
    except errors.ConfigurationError as exc:
        cs.status("error", str(exc))
        return EXIT_CONFIG_ERROR

    options = RunOptions(
        font_path=args.font_path,
        output=args.output,
        words_per_list=args.words,
        jobs=args.jobs,
        fea=args.fea,
        descender=args.descender,
        force_overrides=args.force_overrides,
    )
    try:
        outcome = application.run(options, configuration)
    except errors.AutobaseError as exc:
        cs.status("error", str(exc))
        return EXIT_RUN_ERROR

    if not args.quiet:
        validation.report_outcome(outcome, args.verbose)
    if outcome.fea is not None:
        sys.stdout.write(outcome.fea)
    elif not args.quiet:
        cs.status("success", f"Wrote font to {outcome.output}")
        console.print(
            f"{cs.INDENT}[dim]Total time: [bold]{time.time() - start_time:.1f}[/bold]s[/dim]"
        )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
