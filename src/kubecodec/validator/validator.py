#!/usr/bin/env python3
"""
KUBECODEC VALIDATOR - The Gatekeeper
------------------------------------
Checks that a decoded document has the minimum shape of a Kubernetes
object: `apiVersion`, `kind` and `metadata`, looked up in that order.
Only key presence is checked; `kind: 123` passes.

Author: KubeCodec Team
Date: 2026-10-19
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from kubecodec.core.config import REQUIRED_FIELDS
from kubecodec.core.errors import ValidationError
from kubecodec.core.models import MappingValue

logger = logging.getLogger("kubecodec.validator")


class ManifestValidator:
    """Required-field gate applied to every decoded document."""

    def __init__(self, required_fields: Sequence[str] = REQUIRED_FIELDS):
        self.required_fields = tuple(required_fields)

    def validate_manifest(self, doc: Any) -> Tuple[bool, str]:
        """
        Returns (passed, message). The message names the first missing
        field, or explains why the document is not a mapping at all.
        """
        if not isinstance(doc, MappingValue):
            return False, f"Document is not a mapping (got {type(doc).__name__})."

        field = self.missing_field(doc)
        if field is not None:
            return False, f"missing field \"{field}\""

        return True, "Manifest has all required fields."

    def missing_field(self, doc: MappingValue) -> Optional[str]:
        for field in self.required_fields:
            if field not in doc:
                return field
        return None

    def ensure_manifest(self, doc: Any, document: Optional[int] = None) -> MappingValue:
        """Raises ValidationError unless doc passes validate_manifest."""
        valid, message = self.validate_manifest(doc)
        if not valid:
            field = self.missing_field(doc) if isinstance(doc, MappingValue) else None
            logger.debug(f"Document {document} failed validation: {message}")
            raise ValidationError(f"Invalid Kubernetes manifest: {message}", field=field, document=document)
        return doc
