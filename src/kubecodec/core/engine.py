#!/usr/bin/env python3
"""
KUBECODEC ENGINE - The Orchestrator
-----------------------------------
ManifestCodec is the entry point for the three public operations:
decode one document, decode a multi-document stream, and encode one or
many manifests back to YAML. It holds no state between calls beyond its
configuration, so a single instance can be shared freely.

Author: KubeCodec Team
Date: 2026-10-19
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from kubecodec.codec.context import DecodeResult
from kubecodec.codec.converter import ValueConverter
from kubecodec.codec.exporter import ManifestExporter
from kubecodec.codec.pipeline import DecodePipeline
from kubecodec.core.config import CodecConfig
from kubecodec.core.errors import SerializationError, ValidationError
from kubecodec.core.models import ListValue, MappingValue

logger = logging.getLogger("kubecodec.engine")

Encodable = Union[MappingValue, ListValue, Sequence[MappingValue], DecodeResult]


class ManifestCodec:
    """
    Principal orchestrator: wires the decode pipeline, the converter and
    the exporter together under one CodecConfig.
    """

    def __init__(self, config: CodecConfig = None):
        self.config = config or CodecConfig()
        self.pipeline = DecodePipeline(self.config)
        self.converter = ValueConverter(self.config)
        self.exporter = ManifestExporter(self.config)

    def split(self, text: str) -> List[str]:
        return self.pipeline.splitter.split(text)

    def decode_one(self, text: str, validate: bool = True) -> MappingValue:
        """
        Decodes the first YAML document in text into a MappingValue.
        Raises ParseError, TypeConversionError or ValidationError.
        """
        return self.pipeline.run_one(text, validate=validate)

    def decode_multi(self, text: str, validate: bool = True) -> DecodeResult:
        """
        Decodes every document in a multi-document stream. Documents that
        fail validation are skipped and reported in DecodeResult.warnings;
        a ParseError anywhere fails the whole call.
        """
        return self.pipeline.run(text, validate=validate)

    def documents_by_key(self, text: str, validate: bool = True) -> Dict[str, MappingValue]:
        """
        Decodes a stream and indexes its manifests by identity key
        (`apiVersion_kind_namespace_name`, or `apiVersion_kind_name` when
        there is no namespace). A repeated key raises ValidationError.
        """
        return self.decode_multi(text, validate=validate).by_key()

    def encode(self, value: Encodable, validate: bool = False) -> str:
        """
        Encodes a single manifest to one YAML document, or a sequence of
        manifests to a `---` separated stream. An empty sequence gives "".
        """
        if isinstance(value, MappingValue):
            return self.exporter.dump_one(self._prepare(value, None, validate))

        if isinstance(value, (list, tuple, ListValue, DecodeResult)):
            natives = [self._prepare(doc, index, validate) for index, doc in enumerate(value)]
            logger.debug(f"Encoding {len(natives)} document(s) as a stream")
            return self.exporter.export(natives)

        raise SerializationError(
            f"Cannot encode {type(value).__name__}: expected a mapping or a sequence of mappings"
        )

    def _prepare(self, doc: Any, index: Union[int, None], validate: bool) -> Any:
        where = "Manifest" if index is None else f"Document {index}"
        if not isinstance(doc, MappingValue):
            raise SerializationError(
                f"{where} is not a mapping (got {type(doc).__name__}); "
                f"YAML manifests must be mapping-rooted",
                index=index,
            )
        if validate:
            try:
                self.pipeline.validator.ensure_manifest(doc, document=index)
            except ValidationError as e:
                raise SerializationError(f"{where} cannot be encoded: {e}", index=index) from e
        return self.converter.to_native(doc)


_default_codec = ManifestCodec()


def decode_one(text: str, validate: bool = True) -> MappingValue:
    return _default_codec.decode_one(text, validate=validate)


def decode_multi(text: str, validate: bool = True) -> DecodeResult:
    return _default_codec.decode_multi(text, validate=validate)


def documents_by_key(text: str, validate: bool = True) -> Dict[str, MappingValue]:
    return _default_codec.documents_by_key(text, validate=validate)


def encode(value: Encodable, validate: bool = False) -> str:
    return _default_codec.encode(value, validate=validate)
