"""Biopolymer command-line interface."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml

from biopolymer.alphabets import family_for
from biopolymer.cli.commands import run_complement, run_convert, run_random_dna, run_validate
from biopolymer.errors import PolymerError
from biopolymer.utils.config import PolymerConfig, load_config
from biopolymer.utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="biopolymer", description="Biopolymer sequence tools")
    parser.add_argument("--config", help="Path to YAML/JSON config file")
    subparsers = parser.add_subparsers(dest="command")

    random_parser = subparsers.add_parser("random-dna", help="Generate random DNA sequences")
    random_parser.add_argument("-c", "--seq-count", dest="count", type=int, required=True)
    random_parser.add_argument("-z", "--seq-size", dest="size", type=int, required=True)
    random_parser.add_argument("-s", "--seed", type=int, default=None, help="RNG seed")
    random_parser.add_argument("-f", "--outfile", default=None, help="Output file (default: stdout)")
    random_parser.add_argument("--fasta", action="store_true", help="Write labelled FASTA records")
    random_parser.add_argument("--case", choices=["lower", "upper", "mixed"], default="lower")

    validate_parser = subparsers.add_parser("validate", help="Validate FASTA records against an alphabet")
    validate_parser.add_argument("file", help="FASTA file")
    _add_alphabet_options(validate_parser)

    complement_parser = subparsers.add_parser("complement", help="Complement DNA/RNA FASTA records")
    complement_parser.add_argument("file", help="FASTA file")
    complement_parser.add_argument("--reverse", action="store_true", help="Reverse complement")
    complement_parser.add_argument(
        "--offset", type=int, default=0, help="Stagger the complement by this many positions"
    )
    complement_parser.add_argument("--gap", default=None, help="Overhang marker (default: config)")
    complement_parser.add_argument("-o", "--outfile", default=None)
    _add_alphabet_options(complement_parser)

    convert_parser = subparsers.add_parser("convert", help="Convert DNA <-> RNA FASTA records")
    convert_parser.add_argument("file", help="FASTA file")
    convert_parser.add_argument("--to", choices=["rna", "dna"], required=True)
    convert_parser.add_argument("--alphabet", default=None, help="Alphabet name of the input (default: config)")
    convert_parser.add_argument("-o", "--outfile", default=None)

    return parser


def _add_alphabet_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--kind", choices=["dna", "rna", "amino_acid"], default=None)
    parser.add_argument("--alphabet", default=None, help="Alphabet name, e.g. common, with_n, iupac")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config(Path(args.config)) if args.config else PolymerConfig()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        get_logger("cli").error("Could not load config %s: %s", args.config, exc)
        return 1
    logger = get_logger("cli", level=config.log_level)

    try:
        return _dispatch(args, config)
    except (PolymerError, KeyError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


def _dispatch(args: argparse.Namespace, config: PolymerConfig) -> int:
    if args.command == "random-dna":
        return run_random_dna(
            count=args.count,
            size=args.size,
            seed=args.seed if args.seed is not None else config.seed,
            outfile=args.outfile,
            fasta=args.fasta,
            case=args.case,
        )
    if args.command == "convert":
        return run_convert(
            args.file,
            to=args.to,
            alphabet_name=args.alphabet or config.alphabet,
            outfile=args.outfile,
        )

    kind = args.kind or config.kind
    alphabet = family_for(kind).get(args.alphabet or config.alphabet)
    if args.command == "validate":
        return run_validate(args.file, kind=kind, alphabet=alphabet)
    return run_complement(
        args.file,
        kind=kind,
        alphabet=alphabet,
        reverse=args.reverse,
        offset=args.offset,
        gap=args.gap if args.gap is not None else config.gap,
        outfile=args.outfile,
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
