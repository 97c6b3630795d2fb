# main.py

import argparse
import sys
import time
from pathlib import Path

from rich.console import Console

from votermatch.config import get_config
from votermatch.exceptions import VoterMatchError
from votermatch.logger import get_logger, set_console_level
from votermatch.matching import TIER_SETS
from votermatch.pipeline import parse_owner_source, run_matching
from votermatch.reporting import print_summary

console = Console(force_terminal=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match property owners against the voter roll"
    )

    parser.add_argument("--voters", required=True, help="Voter JSON file")
    parser.add_argument(
        "--owners",
        required=True,
        action="append",
        metavar="[TYPE=]PATH",
        help="Owner JSON file; repeat for several datasets. "
             "TYPE=PATH tags every owner in the file with ownerType=TYPE",
    )
    parser.add_argument("--output-dir", help="Directory for the JSON and CSV match files")
    parser.add_argument("--output-name", help="File stem for the match files")
    parser.add_argument("--tiers", choices=sorted(TIER_SETS), help="Confidence tier set")
    parser.add_argument(
        "--contact-only",
        action="store_true",
        help="Only compare voters with an email or phone number",
    )
    parser.add_argument("--city", help="Only compare voters living or receiving mail in CITY")
    parser.add_argument("--debug", action="store_true", help="Log every match")
    parser.add_argument("--no-progress", action="store_true")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.debug:
        config.debug = True
        set_console_level(debug=True)
    if args.output_dir:
        config.output_dir = Path(args.output_dir)
    if args.tiers:
        config.match.tier_set = args.tiers
    if args.contact_only:
        config.match.require_contact = True
    if args.city is not None:
        config.match.voter_city = args.city

    logger = get_logger("votermatch")
    logger.info("🗳️ Owner/voter matching started")
    start_time = time.perf_counter()

    try:
        owner_sources = [parse_owner_source(value) for value in args.owners]
        result = run_matching(
            config,
            voters_path=args.voters,
            owner_sources=owner_sources,
            output_name=args.output_name,
            show_progress=False if args.no_progress else None,
        )
    except VoterMatchError as e:
        logger.error(f"❌ {e}")
        return 1

    print_summary(result, console)

    elapsed = time.perf_counter() - start_time
    logger.info(f"🎉 Matching completed in {elapsed:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
