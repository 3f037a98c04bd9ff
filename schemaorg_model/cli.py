#!/usr/bin/env python
"""schemaorg-model CLI.

Usage:
    schemaorg-model generate [OUTPUT] [--config FILE] [--vocab FILE ...]
    schemaorg-model list-types [--config FILE] [--vocab FILE ...]

Examples:
    # Generate every schema.org type
    schemaorg-model generate out --vocab schema.ttl

    # Generate the types listed in a config file, checking GoodRelations
    schemaorg-model generate out --config schema.yml \\
        --vocab schema.ttl --relations goodrelations.owl

    # Generate without running ruff afterwards
    schemaorg-model generate out --config schema.yml --vocab schema.ttl --no-format

    # List enumerations and classes found in a vocabulary
    schemaorg-model list-types --vocab schema.ttl
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .errors import ConfigError, UnknownAnnotationGeneratorError
from .generator import TypesGenerator
from .logging import PACKAGE_LOGGER, DiagnosticsCounter, configure_logging
from .ontology.goodrelations import GoodRelationsBridge
from .ontology.graph import OntologyModel, is_enum
from .output.formatter import FormatterChain

DEFAULT_VOCAB = "schema.ttl"


def _log_level(args) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose:
        return logging.DEBUG
    return logging.INFO


def generate_command(args) -> int:
    """Generate model classes."""
    try:
        config = load_config(args.config)
    except (ConfigError, UnknownAnnotationGeneratorError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        config.output = Path(args.output)

    try:
        ontology = OntologyModel.from_files(args.vocab, namespace=config.vocabulary_namespace)
        bridge = GoodRelationsBridge.from_files(args.relations or [])
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    counter = DiagnosticsCounter()
    logging.getLogger(PACKAGE_LOGGER).addHandler(counter)
    try:
        formatter = None if args.no_format else FormatterChain(enable_ruff_check=args.fix)

        generator = TypesGenerator(ontology, bridge=bridge, formatter=formatter)
        written = generator.generate(config)
    finally:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(counter)

    print(f"Wrote {len(written)} files to {config.output} ({counter.summary()})")
    return 0


def list_types_command(args) -> int:
    """List the types of a vocabulary."""
    try:
        config = load_config(args.config)
        ontology = OntologyModel.from_files(args.vocab, namespace=config.vocabulary_namespace)
    except (ConfigError, UnknownAnnotationGeneratorError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    types = sorted(ontology.types(), key=lambda t: t.name)
    for vocabulary_type in types:
        kind = "enum" if is_enum(vocabulary_type) else "class"
        print(f"{kind:6} {vocabulary_type.name}")

    print(f"\n{len(types)} types")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="schemaorg-model",
        description="Generate Python model classes from a schema.org vocabulary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate model classes")
    generate_parser.add_argument("output", nargs="?", default=None, help="Output directory (overrides the config)")
    generate_parser.add_argument("--config", "-c", default=None, help="YAML configuration file")
    generate_parser.add_argument(
        "--vocab",
        action="append",
        default=None,
        help=f"Vocabulary file, repeatable (default: {DEFAULT_VOCAB})",
    )
    generate_parser.add_argument(
        "--relations",
        action="append",
        default=None,
        help="GoodRelations vocabulary file, repeatable",
    )
    generate_parser.add_argument("--no-format", action="store_true", help="Do not run ruff on generated files")
    generate_parser.add_argument("--fix", action="store_true", help="Also run 'ruff check --fix'")

    # List types command
    list_parser = subparsers.add_parser("list-types", help="List vocabulary types")
    list_parser.add_argument("--config", "-c", default=None, help="YAML configuration file (for vocabularyNamespace)")
    list_parser.add_argument("--vocab", action="append", default=None, help="Vocabulary file, repeatable")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if getattr(args, "vocab", None) is None:
        args.vocab = [DEFAULT_VOCAB]

    configure_logging(_log_level(args))

    if args.command == "generate":
        return generate_command(args)
    elif args.command == "list-types":
        return list_types_command(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
