#!/usr/bin/env python3
"""
KUBECODEC LOADER - Precision-Preserving YAML Parsing
----------------------------------------------------
Wraps ruamel.yaml's safe loader so that a parsed document only ever
contains the native types the converter understands:

* scalars resolve with YAML 1.1 rules, as Kubernetes reads them:
  `0644` is the octal 420 and `yes`/`on` are booleans; a document
  that declares `%YAML 1.2` is read with 1.2 rules instead;
* float scalars become Decimal built from the literal text, so
  `0.1` stays exactly 0.1 instead of passing through a binary float;
* integer literals longer than the configured digit limit are refused;
* timestamps stay as their source text, the way Kubernetes sees them
  after its YAML -> JSON step;
* a repeated mapping key keeps the last value seen.

Author: KubeCodec Team
Date: 2026-10-19
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.constructor import ConstructorError, SafeConstructor

from kubecodec.core.config import MAX_NUMBER_DIGITS, CodecConfig
from kubecodec.core.errors import ParseError

YAML_VERSION = (1, 1)

_SPECIAL_FLOATS = {
    '.inf': 'Infinity', '+.inf': 'Infinity', '-.inf': '-Infinity',
    '.nan': 'NaN',
}


class ManifestConstructor(SafeConstructor):
    """Safe constructor tuned for Kubernetes manifests."""

    max_number_digits = MAX_NUMBER_DIGITS

    def check_mapping_key(self, node: Any, key_node: Any, mapping: Any, key: Any, value: Any) -> bool:
        # Last-seen wins: always let the caller store the value.
        return True

    def construct_yaml_int(self, node: Any) -> int:
        literal = str(self.construct_scalar(node))
        if len(literal.replace('_', '')) > self.max_number_digits:
            raise ConstructorError(
                None, None,
                f"integer literal is longer than {self.max_number_digits} digits",
                node.start_mark,
            )
        try:
            return SafeConstructor.construct_yaml_int(self, node)
        except ValueError as e:
            raise ConstructorError(
                None, None,
                f"could not read integer literal: {e}",
                node.start_mark,
            ) from e

    def construct_yaml_decimal(self, node: Any) -> Decimal:
        literal = self.construct_scalar(node)
        text = str(literal).replace('_', '')
        special = _SPECIAL_FLOATS.get(text.lower())
        if special is not None:
            return Decimal(special)
        try:
            if ':' in text:
                return self._sexagesimal(text)
            return Decimal(text)
        except InvalidOperation:
            raise ConstructorError(
                None, None,
                f"could not read float literal {literal!r}",
                node.start_mark,
            )

    def _sexagesimal(self, text: str) -> Decimal:
        # YAML 1.1 base 60 float, e.g. 190:20:30.15
        sign = -1 if text.startswith('-') else 1
        total = Decimal(0)
        for part in text.lstrip('+-').split(':'):
            total = total * 60 + Decimal(part)
        return sign * total

    def construct_yaml_timestamp_text(self, node: Any, values: Any = None) -> str:
        return str(self.construct_scalar(node))


ManifestConstructor.add_constructor('tag:yaml.org,2002:int', ManifestConstructor.construct_yaml_int)
ManifestConstructor.add_constructor('tag:yaml.org,2002:float', ManifestConstructor.construct_yaml_decimal)
ManifestConstructor.add_constructor('tag:yaml.org,2002:timestamp', ManifestConstructor.construct_yaml_timestamp_text)


class ManifestLoader:
    """
    Parses YAML text into native Python values (dict, list, str, bool,
    int, Decimal, None). Any syntax problem is reported as ParseError.
    """

    def __init__(self, config: CodecConfig = None):
        self.config = config or CodecConfig()
        self.constructor = type('ManifestConstructor', (ManifestConstructor,), {
            'max_number_digits': self.config.max_number_digits,
        })

    def _new_yaml(self) -> YAML:
        # A fresh instance per call: ruamel.yaml parsers hold state.
        yaml = YAML(typ='safe', pure=True)
        yaml.Constructor = self.constructor
        yaml.version = YAML_VERSION
        return yaml

    def load_first(self, text: str, document: int = 0) -> Any:
        """Returns the first document of the stream, or None if there is none."""
        try:
            for data in self._new_yaml().load_all(text):
                return data
            return None
        except YAMLError as e:
            raise self._parse_error(e, document) from e
        except RecursionError as e:
            raise ParseError("Document nesting is too deep to parse", document=document) from e

    def _parse_error(self, error: YAMLError, document: int) -> ParseError:
        mark = getattr(error, 'problem_mark', None) or getattr(error, 'context_mark', None)
        problem = getattr(error, 'problem', None) or str(error).strip() or type(error).__name__
        problem = problem.splitlines()[0]
        if mark is not None:
            return ParseError(f"Invalid YAML: {problem}", document=document,
                              line=mark.line + 1, column=mark.column + 1)
        return ParseError(f"Invalid YAML: {problem}", document=document)
