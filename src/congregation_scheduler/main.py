import argparse
import logging
import os
import sys
from pathlib import Path
from congregation_scheduler import file_io, utils
from congregation_scheduler.file_io import ExtractionParseError
from congregation_scheduler.roster import Roster
from congregation_scheduler.validation import (
    IMPORT_KINDS,
    ImportValidationError,
    RosterFileError,
    ValidationContext,
    load_and_clean,
    load_roster,
)


def resolve_roster(roster_file=None) -> Roster:
    if roster_file:
        return load_roster(roster_file)
    logging.debug("No roster file given; using the built-in roster")
    return Roster.default()


def run_check(kind, input_file):
    raw = file_io.load_extracted_json(input_file)
    result = IMPORT_KINDS[kind].validate(raw)
    utils.print_import_summary(kind, result)
    return result.valid


def run_clean(kind, input_file, roster_file=None, congregacao_id="", output_file=None):
    ctx = ValidationContext(roster=resolve_roster(roster_file), congregacao_id=congregacao_id)
    try:
        result = load_and_clean(input_file, kind, ctx)
    except ImportValidationError as exc:
        logging.error(str(exc))
        for warning in exc.warnings:
            logging.warning(warning)
        return False

    utils.print_import_summary(kind, result)
    if output_file:
        file_io.save_json(result.cleaned_data.to_dict(), output_file)
    return True


def run_find_publicador(nome, roster_file=None):
    roster = resolve_roster(roster_file)
    entry = roster.find_by_name(nome)
    if entry is None:
        print(f'Publicador "{nome}" não encontrado')
        return False
    print(f"{entry.nome}: {entry.id}")
    return True


def main():
    # Defaults from environment if available
    default_roster_file = os.getenv("ROSTER_FILE")
    default_congregacao_id = os.getenv("CONGREGACAO_ID", "")

    parser = argparse.ArgumentParser(description="Congregation schedule import CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")

    subparsers = parser.add_subparsers(dest="command")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check the structure of an extracted file")
    check_parser.add_argument("--kind", required=True, choices=sorted(IMPORT_KINDS))
    check_parser.add_argument("--input", required=True, type=Path, help="Extracted JSON file")

    # Clean command
    clean_parser = subparsers.add_parser("clean", help="Validate and clean an extracted file")
    clean_parser.add_argument("--kind", required=True, choices=sorted(IMPORT_KINDS))
    clean_parser.add_argument("--input", required=True, type=Path, help="Extracted JSON file")
    clean_parser.add_argument(
        "--roster",
        type=Path,
        default=default_roster_file,
        help="Roster JSON/CSV file (default: $ROSTER_FILE or the built-in roster)",
    )
    clean_parser.add_argument(
        "--congregacao-id",
        default=default_congregacao_id,
        help="Congregation id for weeks that lack one (default: $CONGREGACAO_ID)",
    )
    clean_parser.add_argument("--output", type=Path, help="Where to write the cleaned JSON")

    # Find publisher command
    find_parser = subparsers.add_parser("find-publicador", help="Look up a name in the roster")
    find_parser.add_argument("nome")
    find_parser.add_argument("--roster", type=Path, default=default_roster_file)

    args = parser.parse_args()
    utils.setup_logging(verbose=args.verbose)

    # Routing logic
    try:
        if args.command == "check":
            ok = run_check(args.kind, args.input)
        elif args.command == "clean":
            ok = run_clean(
                args.kind,
                args.input,
                roster_file=args.roster,
                congregacao_id=args.congregacao_id,
                output_file=args.output,
            )
        elif args.command == "find-publicador":
            ok = run_find_publicador(args.nome, roster_file=args.roster)
        else:
            parser.print_help()
            return
    except (ExtractionParseError, RosterFileError, FileNotFoundError) as exc:
        logging.error(str(exc))
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
