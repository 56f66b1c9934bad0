#!/usr/bin/env python

import argparse
import asyncio
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from name_guesser.answers import AnswerSet
from name_guesser.config import DATA_URL, STATE_DATA_URL, TERRITORY_DATA_URL, EngineSettings
from name_guesser.exceptions import NameGuesserError
from name_guesser.log import setup_logging
from name_guesser.predictor import load_predictor
from name_guesser.ranker import HybridRanker
from name_guesser.sources import STATE_PATTERN, download_and_extract


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run_guesser",
        description="Guess a first name from quiz answers using U.S. baby name data.",
    )
    parser.add_argument("--answers", type=Path, help="JSON file with the quiz answers")
    parser.add_argument("--top", type=int, help="Number of guesses to print")
    parser.add_argument("--data-dir", type=Path, help="Directory with yobYYYY.txt files")
    parser.add_argument("--state-dir", type=Path, help="Directory with per-state XX.TXT files")
    parser.add_argument("--territory-dir", type=Path, help="Directory with per-territory XX.TXT files")
    parser.add_argument("--years", help="Comma-separated years to load, e.g. 2020,2021")
    parser.add_argument("--download", action="store_true", help="Download the SSA data before loading")
    parser.add_argument("--details", metavar="NAME", help="Print statistics and similar names for NAME")
    parser.add_argument("--predictor", type=Path, help="Saved predictor weights (.npz)")
    parser.add_argument("--train", type=Path, help="JSON list of quiz records to train the predictor on")
    parser.add_argument("--save-predictor", type=Path, help="Where to write the trained predictor")
    parser.add_argument("--no-predictor", action="store_true", help="Use rule-based scoring only")
    parser.add_argument("--seed", type=int, help="Seed for the confidence noise")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def settings_from_args(args: argparse.Namespace) -> EngineSettings:
    settings = EngineSettings.from_env()
    if args.data_dir:
        settings.data.data_dir = args.data_dir
    if args.state_dir:
        settings.data.state_dir = args.state_dir
    if args.territory_dir:
        settings.data.territory_dir = args.territory_dir
    if args.years:
        settings.data.years = tuple(int(y) for y in args.years.split(",") if y.strip())
    if args.top:
        settings.ranking.top_k = args.top
    if args.no_predictor:
        settings.ranking.use_predictor = False
    if args.log_level:
        settings.log_level = args.log_level.upper()
    return settings.validate()


def print_details(ranker: HybridRanker, name: str) -> None:
    db = ranker.database
    details = db.get_name_details(name)
    if details is None:
        print(f"No records for {name}.")
        return
    print(f"--- {name} ---")
    for label, value in details.items():
        print(f"{label:>20}: {value}")
    for mode in ("spelling", "sound"):
        similar = db.find_similar_names(name, by=mode, limit=5)
        listed = ", ".join(f"{r.name} ({r.gender.value})" for r, _ in similar) or "none"
        print(f"{'Similar by ' + mode:>20}: {listed}")


async def run(args: argparse.Namespace, settings: EngineSettings) -> int:
    predictor = None
    if settings.ranking.use_predictor:
        predictor = load_predictor(args.predictor)
        if args.train:
            records = json.loads(args.train.read_text(encoding="utf-8"))
            used = predictor.train(records)
            print(f"Trained predictor on {used} example(s)")
            if used and args.save_predictor:
                print(f"Saved predictor to {predictor.save(args.save_predictor)}")

    ranker = HybridRanker.from_settings(settings, predictor=predictor)
    if args.seed is not None:
        ranker.rng = random.Random(args.seed)
    await ranker.database.ensure_loaded()

    if args.details:
        print_details(ranker, args.details)
    if args.answers:
        answers = AnswerSet.from_mapping(json.loads(args.answers.read_text(encoding="utf-8")))
        guesses = await ranker.calculate_top_guesses(answers)
        for rank, guess in enumerate(guesses, start=1):
            print(f"{rank}. {guess.name:<15} {guess.confidence:>3}%  ({guess.source.value})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.answers and not args.details and not args.download:
        parser.error("nothing to do: pass --answers, --details or --download")

    try:
        settings = settings_from_args(args)
        setup_logging(settings.log_level)
        if args.download:
            download_and_extract(settings.data.data_dir, DATA_URL)
            if settings.data.state_dir:
                download_and_extract(settings.data.state_dir, STATE_DATA_URL, STATE_PATTERN)
            if settings.data.territory_dir:
                download_and_extract(settings.data.territory_dir, TERRITORY_DATA_URL, STATE_PATTERN)
        if not args.answers and not args.details:
            return 0
        return asyncio.run(run(args, settings))
    except (NameGuesserError, OSError, json.JSONDecodeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
