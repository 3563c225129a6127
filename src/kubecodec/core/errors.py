#!/usr/bin/env python3
"""
KUBECODEC ERRORS
----------------
Stable error kinds raised by the decode and encode operations. Each one
carries the field, type or position it is about so that callers can
build their own diagnostics from it.

Author: KubeCodec Team
Date: 2026-10-19
"""

from typing import Optional


class ManifestError(Exception):
    """Base class for every error the codec raises."""


class ParseError(ManifestError):
    """Input text is not well-formed YAML, or is nested beyond the configured limits."""

    def __init__(self, message: str, document: Optional[int] = None,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.document = document
        self.line = line
        self.column = column
        location = []
        if document is not None:
            location.append(f"document {document}")
        if line is not None:
            location.append(f"line {line}")
        if column is not None:
            location.append(f"column {column}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class TypeConversionError(ManifestError):
    """A native value has a type the converter does not know how to map."""

    def __init__(self, type_name: str, path: str = ""):
        self.type_name = type_name
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"Unsupported value type '{type_name}'{where}")


class ValidationError(ManifestError):
    """A decoded document is missing a required manifest field."""

    def __init__(self, message: str, field: Optional[str] = None, document: Optional[int] = None):
        self.field = field
        self.document = document
        super().__init__(message)


class SerializationError(ManifestError):
    """A structured value cannot be written out as a YAML document."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)
