#!/usr/bin/env python3
"""
KUBECODEC DECODE PIPELINE
-------------------------
Runs raw text through the decode phases in a fixed order:

    split -> parse -> convert -> validate

Parse and conversion problems abort the call. In a multi-document
decode, a document that fails validation is skipped and recorded as a
warning so the rest of the batch still comes through.

Author: KubeCodec Team
Date: 2026-10-19
"""

import logging

from kubecodec.codec.context import DecodeResult, DecodeWarning
from kubecodec.codec.converter import ValueConverter
from kubecodec.codec.loader import ManifestLoader
from kubecodec.codec.splitter import DocumentSplitter
from kubecodec.core.config import CodecConfig
from kubecodec.core.errors import ValidationError
from kubecodec.core.models import MappingValue
from kubecodec.validator.validator import ManifestValidator

logger = logging.getLogger("kubecodec.pipeline")


class DecodePipeline:
    """Owns one instance of each decode phase."""

    def __init__(self, config: CodecConfig = None):
        self.config = config or CodecConfig()
        self.splitter = DocumentSplitter()
        self.loader = ManifestLoader(self.config)
        self.converter = ValueConverter(self.config)
        self.validator = ManifestValidator(self.config.required_fields)

    def _require_mapping(self, value, index: int) -> MappingValue:
        if not isinstance(value, MappingValue):
            raise ValidationError(
                f"Invalid Kubernetes manifest: document is not a mapping (got {type(value).__name__})",
                document=index,
            )
        return value

    def run_one(self, text: str, validate: bool = True) -> MappingValue:
        """Decodes the first document in text. Later documents are not read."""
        native = self.loader.load_first(text)
        value = self._require_mapping(self.converter.to_structured(native, document=0), 0)
        if validate:
            self.validator.ensure_manifest(value, document=0)
        return value

    def run(self, text: str, validate: bool = True) -> DecodeResult:
        fragments = self.splitter.split(text)
        result = DecodeResult(fragment_count=len(fragments))

        for index, fragment in enumerate(fragments):
            native = self.loader.load_first(fragment, document=index)

            # Comment-only fragments parse to None; `{}` parses to an empty mapping.
            value = None if native is None else self.converter.to_structured(native, document=index)
            if value is None or value == MappingValue():
                self._skip(result, DecodeWarning(index, "Empty document: no values found"))
                continue

            try:
                manifest = self._require_mapping(value, index)
                if validate:
                    self.validator.ensure_manifest(manifest, document=index)
            except ValidationError as e:
                self._skip(result, DecodeWarning(index, str(e), e.field))
                continue

            result.documents.append(manifest)

        logger.debug(f"Decoded {len(result.documents)} of {len(fragments)} document(s)")
        return result

    def _skip(self, result: DecodeResult, warning: DecodeWarning):
        logger.warning(f"Skipping document {warning.index}: {warning.message}")
        result.warnings.append(warning)
