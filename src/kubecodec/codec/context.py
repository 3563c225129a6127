#!/usr/bin/env python3
"""
KUBECODEC DECODE CONTEXT
------------------------
The record a multi-document decode hands back: the manifests that made
it through, plus a warning for every document that was skipped. The
manifests can also be looked up by their identity key
(`apiVersion_kind_namespace_name`).

Author: KubeCodec Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from kubecodec.core.errors import ValidationError
from kubecodec.core.models import MappingValue, StringValue, Value


def _key_part(value: Optional[Value], name: str) -> str:
    if isinstance(value, StringValue) and value.value:
        return value.value
    raise ValidationError(f"Cannot identify manifest: {name} must be a non-empty string", field=name)


def manifest_key(manifest: MappingValue) -> str:
    """
    Identity of a manifest: `apiVersion_kind_namespace_name`, or
    `apiVersion_kind_name` for cluster-scoped objects that carry no
    namespace. Raises ValidationError if apiVersion, kind or
    metadata.name is not a non-empty string.
    """
    metadata = manifest.get("metadata")
    if not isinstance(metadata, MappingValue):
        metadata = MappingValue()

    parts = [_key_part(manifest.get("apiVersion"), "apiVersion"), _key_part(manifest.get("kind"), "kind")]
    namespace = metadata.get("namespace")
    if isinstance(namespace, StringValue) and namespace.value:
        parts.append(namespace.value)
    parts.append(_key_part(metadata.get("name"), "metadata.name"))
    return "_".join(parts)


@dataclass(frozen=True)
class DecodeWarning:
    """A document that was skipped instead of failing the whole decode."""
    index: int                    # Position of the fragment in the stream (0-based)
    message: str
    field: Optional[str] = None   # Missing required field, when that was the reason


@dataclass
class DecodeResult:
    """
    Ordered manifests from one decode_multi call. Acts as a read-only
    sequence of its documents; warnings ride alongside.
    """
    documents: List[MappingValue] = field(default_factory=list)
    warnings: List[DecodeWarning] = field(default_factory=list)
    fragment_count: int = 0       # Non-blank fragments the splitter produced

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[MappingValue]:
        return iter(self.documents)

    def __getitem__(self, index):
        return self.documents[index]

    @property
    def skipped(self) -> int:
        return len(self.warnings)

    def by_key(self) -> Dict[str, MappingValue]:
        """
        Documents keyed by manifest_key, in stream order. Two documents
        with the same key raise ValidationError.
        """
        manifests = {}
        for doc in self.documents:
            key = manifest_key(doc)
            if key in manifests:
                raise ValidationError(f"Duplicate manifest found with ID: {key}", field="metadata.name")
            manifests[key] = doc
        return manifests
