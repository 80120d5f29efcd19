#!/usr/bin/env python3
"""
Generate NPC names from the command line, one JSON object per line.

    python -m app.cli Dwarf -n 3 --temperature 1.5
"""
import argparse
import sys

from pydantic import ValidationError

from app.agents.llm.client import STRATEGIES
from app.agents.llm.errors import GenerationError
from app.agents.npc_namer import build_name_prompt, generate_npc_names
from app.agents.schemas import SamplingOptions
from app.logging_config import configure_logging
from app.settings import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="npc-namer", description="Generate random RPG character names.")
    parser.add_argument("kind", help='character kind, e.g. "Dwarf"')
    parser.add_argument("-n", "--count", type=int, default=1)
    parser.add_argument("--strategy", choices=STRATEGIES, default="format")
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--top-k", type=int)
    parser.add_argument("--top-p", type=float)
    parser.add_argument("--repeat-last-n", type=int)
    parser.add_argument("--repeat-penalty", type=float)
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def _sampling_from(args, parser: argparse.ArgumentParser) -> SamplingOptions:
    try:
        return SamplingOptions(
            temperature=args.temperature,
            top_k=args.top_k,
            top_p=args.top_p,
            repeat_last_n=args.repeat_last_n,
            repeat_penalty=args.repeat_penalty,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"--{str(err['loc'][0]).replace('_', '-')}: {err['msg']}" for err in e.errors()
        )
        parser.error(problems)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error(f"--count must be at least 1, got {args.count}")
    try:
        build_name_prompt(args.kind)
    except ValueError as e:
        parser.error(str(e))
    sampling = _sampling_from(args, parser)

    configure_logging(args.log_level)

    try:
        names = generate_npc_names(args.kind, args.count, sampling=sampling, strategy=args.strategy)
    except GenerationError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    for npc in names:
        print(npc.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
