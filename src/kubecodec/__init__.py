"""
KubeCodec - Kubernetes YAML manifests to structured values and back.
"""

from kubecodec.codec.context import DecodeResult, DecodeWarning, manifest_key
from kubecodec.codec.converter import to_native, to_structured
from kubecodec.codec.splitter import split_documents
from kubecodec.core.config import CodecConfig
from kubecodec.core.engine import (
    ManifestCodec, decode_multi, decode_one, documents_by_key, encode,
)
from kubecodec.core.errors import (
    ManifestError, ParseError, SerializationError, TypeConversionError, ValidationError,
)
from kubecodec.core.models import (
    BoolValue, ListValue, MappingValue, NullValue, NumberValue, StringValue, Value,
)

__version__ = "1.0.0"

__all__ = [
    "BoolValue", "CodecConfig", "DecodeResult", "DecodeWarning", "ListValue",
    "ManifestCodec", "ManifestError", "MappingValue", "NullValue", "NumberValue",
    "ParseError", "SerializationError", "StringValue", "TypeConversionError",
    "ValidationError", "Value", "decode_multi", "decode_one", "documents_by_key",
    "encode", "manifest_key", "split_documents", "to_native", "to_structured",
]
