"""script-structurer CLI entry point."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="script-structurer",
        description="Script Structurer — LLM script text to structured Document",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log pipeline state transitions to stderr",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    structure_parser = sub.add_parser(
        "structure",
        help="Structure raw script text → Document JSON",
    )
    structure_parser.add_argument(
        "--input", required=True, metavar="raw.txt",
        help="Path to the raw model output ('-' reads stdin)",
    )
    structure_parser.add_argument(
        "--script", required=True, metavar="script.json",
        help="Path to the script context JSON (title required)",
    )
    structure_parser.add_argument(
        "--project", metavar="project.json",
        help="Path to the project context JSON",
    )
    structure_parser.add_argument(
        "--config", metavar="config.json",
        help="Path to a StructuringConfig JSON file",
    )
    structure_parser.add_argument(
        "--output", metavar="document.json",
        help="Destination path for the Document JSON (default: stdout)",
    )
    validate_parser = sub.add_parser(
        "validate-document",
        help="Validate a Document JSON file against the canonical contract",
    )
    validate_parser.add_argument(
        "--document", required=True, metavar="document.json",
        help="Path to a Document JSON file",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(name)s: %(message)s",
            stream=sys.stderr,
        )

    if args.command == "structure":
        try:
            produce_document(
                Path(args.input) if args.input != "-" else None,
                Path(args.script),
                Path(args.project) if args.project else None,
                Path(args.config) if args.config else None,
                Path(args.output) if args.output else None,
            )
        except ValueError as exc:
            print(str(exc) if str(exc).startswith("ERROR:") else f"ERROR: {exc}")
            sys.exit(1)
        except OSError as exc:
            print(f"ERROR: {exc}")
            sys.exit(1)
        sys.exit(0)
    elif args.command == "validate-document":
        import jsonschema
        try:
            validate_document_file(Path(args.document))
        except jsonschema.ValidationError as exc:
            print(f"ERROR: invalid Document — {exc.message}")
            sys.exit(1)
        except (OSError, ValueError) as exc:
            print(f"ERROR: {exc}")
            sys.exit(1)
        print("OK: Document is valid")
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


def validate_document_file(document_path: Path) -> None:
    """Load a Document JSON file and check it against contract and model.

    Raises ``jsonschema.ValidationError`` if the file does not conform to
    ``contracts/Document.v1.json`` and ``ValueError`` if it breaks a model
    invariant (header position, id ordering).
    """
    from script_structurer.contract_validate import validate_document_contract
    from script_structurer.schemas.document_v1 import validate_document

    data = json.loads(document_path.read_text(encoding="utf-8"))
    validate_document_contract(data)
    errors = validate_document(data)
    if errors:
        raise ValueError(f"invalid Document — {errors[0]}")


def produce_document(
    input_path: Path | None,
    script_path: Path,
    project_path: Path | None,
    config_path: Path | None,
    output_path: Path | None,
) -> None:
    """Structure raw text with the given contexts, validate, then write.

    The output file is never written when the produced Document fails the
    contract check.
    """
    from script_structurer.contract_validate import validate_document_model
    from script_structurer.schemas.context_v1 import load_project_context, load_script_context
    from script_structurer.schemas.document_v1 import dump_document
    from script_structurer.structuring.config import load_config
    from script_structurer.structuring.pipeline import structure_script

    raw_text = (
        sys.stdin.read() if input_path is None
        else input_path.read_text(encoding="utf-8")
    )
    script = load_script_context(script_path)
    project = load_project_context(project_path) if project_path else None
    config = load_config(config_path)

    document = structure_script(raw_text, project, script, config=config)
    validate_document_model(document)

    payload = dump_document(document)
    if output_path is None:
        print(payload)
    else:
        output_path.write_text(payload + "\n", encoding="utf-8")


if __name__ == "__main__":
    main()
