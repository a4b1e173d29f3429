#!/usr/bin/env python3
"""Log Monitor - Entry point"""

import argparse
import logging
import math
import sys

from rich.logging import RichHandler

from log_monitor import (
    VERSION, AlertSink, Config, ConfigParseError, LogScanner, ReportStyle,
    SinkUnavailable, SourceUnavailable, Watcher, make_console, print_banner,
    print_json, print_report, print_totals,
)
from log_monitor.patterns import DEFAULT_FAILED_THRESHOLD, DEFAULT_INTERVAL, DEFAULT_LOG_FILE

EXIT_OK = 0
EXIT_SINK_UNAVAILABLE = 1
EXIT_CONFIG_ERROR = 2
EXIT_SOURCE_UNAVAILABLE = 3

logger = logging.getLogger("log_monitor")


def setup_logging(verbose: bool = False, color: bool = True):
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    logger.handlers.clear()
    handler = RichHandler(console=make_console(color, stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Log Monitor - Failed login, error and critical event alerting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument("--file", default=DEFAULT_LOG_FILE, help="Log file to scan")
    parser.add_argument("--failed", default=str(DEFAULT_FAILED_THRESHOLD),
                        help="Alert when failed logins exceed this count")
    parser.add_argument("--no-color", dest="color", action="store_false",
                        help="Disable colored output")
    parser.add_argument("--watch", action="store_true",
                        help="Keep polling the file for new lines")
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL,
                        help="Seconds between polls in watch mode")
    parser.add_argument("--cycles", type=int, default=None,
                        help="Stop watch mode after this many polls")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"LogMonitor v{VERSION}")
    return parser


def build_config(argv=None):
    """Parse command-line arguments into a Config.

    Unknown arguments are returned alongside the config rather than
    rejected. Raises ConfigParseError for a non-numeric threshold or a
    negative or non-finite poll interval.
    """
    args, unknown = build_parser().parse_known_args(argv)
    try:
        threshold = int(args.failed)
    except ValueError:
        raise ConfigParseError(f"Invalid --failed value: {args.failed!r}") from None
    if not math.isfinite(args.interval) or args.interval < 0:
        raise ConfigParseError(f"Invalid --interval value: {args.interval!r}")

    config = Config(
        filename=args.file,
        failed_threshold=threshold,
        color=args.color,
        watch=args.watch,
        interval=args.interval,
        cycles=args.cycles,
        json=args.json,
        verbose=args.verbose,
    )
    return config, unknown


def run_once(config: Config, sink: AlertSink, console, style: ReportStyle) -> int:
    scanner = LogScanner(config)
    try:
        result = scanner.scan_file()
    except SourceUnavailable as e:
        make_console(config.color, stderr=True).print(f"❌ {e}", markup=False)
        return EXIT_SOURCE_UNAVAILABLE

    sink.write(result.alerts)
    if config.json:
        print_json(result, console)
    else:
        print_report(result, console, style, alerts_path=str(sink.path))
    return EXIT_OK


def run_watch(config: Config, sink: AlertSink, console, style: ReportStyle) -> int:
    scanner = LogScanner(config)

    def show(result):
        if config.json:
            print_json(result, console)
            return
        print_report(result, console, style, alerts_path=str(sink.path))
        print_totals(scanner.totals, console, style)

    Watcher(scanner, sink, on_result=show).run(config.cycles)
    return EXIT_OK


def main(argv=None) -> int:
    try:
        config, unknown = build_config(argv)
    except ConfigParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(config.verbose, config.color)
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(unknown))

    console = make_console(config.color)
    style = ReportStyle.for_color(config.color)
    if not config.json:
        print_banner(config, console, style)

    try:
        sink = AlertSink.open(config.alerts_path)
    except SinkUnavailable as e:
        make_console(config.color, stderr=True).print(f"❌ {e}", markup=False)
        return EXIT_SINK_UNAVAILABLE

    with sink:
        if config.watch:
            return run_watch(config, sink, console, style)
        return run_once(config, sink, console, style)


if __name__ == "__main__":
    sys.exit(main())
