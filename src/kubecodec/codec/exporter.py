#!/usr/bin/env python3
"""
KUBECODEC EXPORTER - Deterministic YAML Output
----------------------------------------------
Author: KubeCodec Team
Date: 2026-10-19
"""

import io
import logging
import re
from decimal import Decimal
from typing import Any, List

from ruamel.yaml import YAML
from ruamel.yaml.representer import RoundTripRepresenter

from kubecodec.core.config import MAX_NUMBER_DIGITS, CodecConfig

logger = logging.getLogger("kubecodec.exporter")

DOCUMENT_SEPARATOR = "---\n"

# Plain scalars that a YAML 1.1 or 1.2 reader resolves to something other
# than a string. Strings matching it are written quoted.
NON_STRING_PLAIN = re.compile(r'''^(?:
     y|Y|yes|Yes|YES|n|N|no|No|NO
    |true|True|TRUE|false|False|FALSE
    |on|On|ON|off|Off|OFF
    |~|null|Null|NULL
    |[-+]?0b[0-1_]+
    |[-+]?0x[0-9a-fA-F_]+
    |[-+]?0o[0-7_]+
    |[-+]?[0-9][0-9_]*(?::[0-5]?[0-9])*(?:\.[0-9_]*)?(?:[eE][-+]?[0-9]+)?
    |[-+]?\.[0-9_]+(?:[eE][-+]?[0-9]+)?
    |[-+]?\.(?:inf|Inf|INF)
    |\.(?:nan|NaN|NAN)
)$''', re.X)


def exponent_literal(number: Decimal) -> str:
    """
    Scientific notation for a finite Decimal, e.g. `1.0e+5000`. The
    mantissa always has a '.' and the exponent a sign, so both YAML 1.1
    and 1.2 read it back as a float.
    """
    sign, digits, _ = number.as_tuple()
    text = ''.join(str(d) for d in digits)
    return f"{'-' if sign else ''}{text[0]}.{text[1:] or '0'}e{number.adjusted():+d}"


class ManifestRepresenter(RoundTripRepresenter):
    """
    Round-trip representer that writes Decimal as an exact float literal,
    multi-line strings as literal blocks, and never emits anchors.
    """

    max_number_digits = MAX_NUMBER_DIGITS

    def ignore_aliases(self, data: Any) -> bool:
        return True

    def represent_decimal(self, data: Decimal) -> Any:
        if data.is_nan():
            text = '.nan'
        elif data.is_infinite():
            text = '.inf' if data > 0 else '-.inf'
        elif abs(data.adjusted()) >= self.max_number_digits:
            # Positional notation would spell out every digit.
            text = exponent_literal(data)
        elif data == data.to_integral_value():
            return self.represent_scalar('tag:yaml.org,2002:int', format(data.to_integral_value(), 'f'))
        else:
            # Positional notation always carries a '.', so it reads back as a float.
            text = format(data, 'f')
        return self.represent_scalar('tag:yaml.org,2002:float', text)

    def represent_text(self, data: str) -> Any:
        if '\n' in data:
            # The emitter falls back to a quoted style when a block is not possible.
            return self.represent_scalar('tag:yaml.org,2002:str', data, style='|')
        if NON_STRING_PLAIN.match(data):
            return self.represent_scalar('tag:yaml.org,2002:str', data, style="'")
        return self.represent_str(data)


ManifestRepresenter.add_representer(Decimal, ManifestRepresenter.represent_decimal)
ManifestRepresenter.add_representer(str, ManifestRepresenter.represent_text)


class ManifestExporter:
    """
    The Reconstructor: turns emitter-ready native values (CommentedMap,
    CommentedSeq and scalars) into YAML text. Mapping keys are written in
    the order they were recorded.
    """

    def __init__(self, config: CodecConfig = None):
        self.config = config or CodecConfig()
        self.representer = type('ManifestRepresenter', (ManifestRepresenter,), {
            'max_number_digits': self.config.max_number_digits,
        })

    def _new_yaml(self) -> YAML:
        yaml = YAML(typ='rt')
        yaml.Representer = self.representer
        yaml.indent(mapping=self.config.indent_mapping,
                    sequence=self.config.indent_sequence,
                    offset=self.config.indent_offset)
        yaml.width = self.config.width
        return yaml

    def dump_one(self, data: Any) -> str:
        stream = io.StringIO()
        self._new_yaml().dump(data, stream)
        return stream.getvalue()

    def export(self, docs: List[Any]) -> str:
        """
        Serializes each document on its own and joins them with a `---`
        line between consecutive documents. No documents, no text.
        """
        rendered = [self.dump_one(doc) for doc in docs]
        logger.debug(f"Exported {len(rendered)} document(s)")
        return DOCUMENT_SEPARATOR.join(rendered)
