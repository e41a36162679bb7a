# hostping/cli.py
"""
Command-line interface for hostping.

Examples:
  hostping www.example.com
  hostping 10.0.0.1 --debug
  python3 -m hostping.cli nonsuch.example --platform unix

Prints one line "<TAG>: <message>" and exits 0 only when the host answered.
"""

import argparse
import logging
import sys

from .logging_setup import setup_logging
from .outcome_kinds import EXIT_USAGE
from . import platform_profile
from . import probe_runner
from . import classifier

LOG = logging.getLogger("hostping.cli")

MISSING_HOST_MSG = "ERROR: A host must be provided as an argument"


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with EXIT_USAGE instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"ERROR: {message}", file=sys.stderr)
        raise SystemExit(EXIT_USAGE)


def build_parser():
    p = UsageParser(
        prog="hostping",
        description="Check whether a host answers ICMP echo using the OS ping command.",
    )
    p.add_argument("host", nargs="?", help="DNS name or IP address to ping")
    p.add_argument("--debug", action="store_true", help="Log the raw ping output")
    p.add_argument(
        "--platform",
        default=None,
        metavar="{unix,windows}",
        help="Override the detected ping flavour",
    )
    return p


def format_outcome(outcome, host):
    if outcome.ok:
        message = f"Network ICMP Ping successful for host '{host}'"
    else:
        message = outcome.detail
    return f"{outcome.tag}: {message}"


def check_host(host, profile):
    """Run one probe against host and classify it."""
    raw = probe_runner.run_probe(host, profile)
    outcome = classifier.classify(raw, host, profile)
    LOG.debug("Outcome for %s: %s", host, outcome.kind)
    return outcome


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    # extra positional arguments are ignored, unknown options are not
    args, extra = parser.parse_known_args(argv)
    unknown = [a for a in extra if a.startswith("-") and a != "-"]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")

    setup_logging(debug=args.debug)

    if not args.host:
        print(MISSING_HOST_MSG, file=sys.stderr)
        return EXIT_USAGE

    try:
        profile = platform_profile.select_profile(args.platform)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    outcome = check_host(args.host, profile)
    print(format_outcome(outcome, args.host))
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
