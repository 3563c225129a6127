#!/usr/bin/env python3
"""
KUBECODEC CLI
-------------
Command-line front end for the codec:

    kubecodec decode manifests.yaml --multi
    kubecodec encode manifest.json
    kubecodec split manifests.yaml

Author: KubeCodec Team
Date: 2026-10-19
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from kubecodec import __version__
from kubecodec.cli.formatter import CodecFormatter, to_json
from kubecodec.core.config import CodecConfig
from kubecodec.core.engine import ManifestCodec
from kubecodec.core.errors import ManifestError

logger = logging.getLogger("kubecodec.cli")


class KubeCodecCLI:
    """
    Translates command-line arguments into ManifestCodec calls and
    renders the results.
    """

    def __init__(self, console: Console = None, err_console: Console = None):
        self.parser = argparse.ArgumentParser(
            prog="kubecodec",
            description="KubeCodec - Kubernetes YAML manifest decoder and encoder",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = CodecFormatter(console, err_console)
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"kubecodec v{__version__}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        decode_parser = subparsers.add_parser("decode", help="Decode YAML manifests")
        decode_parser.add_argument("path", help="YAML file, or '-' for stdin")
        decode_parser.add_argument("--multi", action="store_true", help="Decode every document in the stream")
        decode_parser.add_argument("--no-validate", action="store_true",
                                   help="Skip the apiVersion/kind/metadata check")
        decode_parser.add_argument("--json", action="store_true", help="Print decoded values as JSON")
        decode_parser.add_argument("--max-depth", type=int, default=CodecConfig.max_depth,
                                   help=f"Deepest allowed nesting (default: {CodecConfig.max_depth})")

        encode_parser = subparsers.add_parser("encode", help="Encode JSON manifests to YAML")
        encode_parser.add_argument("path", help="JSON file (object or array of objects), or '-' for stdin")
        encode_parser.add_argument("--validate", action="store_true",
                                   help="Require apiVersion/kind/metadata on every manifest")

        split_parser = subparsers.add_parser("split", help="Show the documents of a YAML stream")
        split_parser.add_argument("path", help="YAML file, or '-' for stdin")

    def _read(self, path: str) -> str:
        if path == "-":
            return sys.stdin.read().lstrip('\ufeff')
        # BOM-aware read
        return Path(path).read_text(encoding='utf-8-sig')

    def _decode(self, args: argparse.Namespace) -> int:
        codec = ManifestCodec(CodecConfig(max_depth=args.max_depth))
        text = self._read(args.path)
        validate = not args.no_validate

        if args.multi:
            result = codec.decode_multi(text, validate=validate)
            documents, warnings = result.documents, result.warnings
        else:
            documents, warnings = [codec.decode_one(text, validate=validate)], []

        if args.json:
            out = to_json(documents[0]) if not args.multi else self._json_array(documents)
            self.formatter.console.print(out, markup=False, highlight=False, emoji=False, soft_wrap=True)
        else:
            self.formatter.print_documents_table(documents)
        self.formatter.show_warnings(warnings)
        return 0

    def _json_array(self, documents) -> str:
        if not documents:
            return "[]"
        body = ",\n".join("  " + to_json(doc, level=1) for doc in documents)
        return f"[\n{body}\n]"

    def _encode(self, args: argparse.Namespace) -> int:
        codec = ManifestCodec()
        data = json.loads(self._read(args.path), parse_float=Decimal)
        value = codec.converter.to_structured(data)
        self.formatter.print_yaml(codec.encode(value, validate=args.validate))
        return 0

    def _split(self, args: argparse.Namespace) -> int:
        fragments = ManifestCodec().split(self._read(args.path))
        self.formatter.console.print(f"[bold cyan]{len(fragments)} document(s)[/bold cyan]")
        for i, fragment in enumerate(fragments):
            self.formatter.console.rule(f"document {i}")
            self.formatter.print_yaml(fragment + "\n")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR)

        handlers = {"decode": self._decode, "encode": self._encode, "split": self._split}
        handler = handlers.get(args.command)
        if handler is None:
            self.parser.print_help()
            return 0

        logger.debug(f"Running command '{args.command}'")
        try:
            return handler(args)
        except ManifestError as e:
            self.formatter.print_error(str(e))
        except (OSError, ValueError) as e:
            self.formatter.print_error(f"Invalid input: {e}")
        return 1


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(KubeCodecCLI().run())
    except KeyboardInterrupt:
        Console(stderr=True).print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
