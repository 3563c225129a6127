#!/usr/bin/env python3
"""
KUBECODEC CONFIGURATION
-----------------------
Tunable limits and emitter settings shared by the decode pipeline and
the exporter. The defaults follow the standard Kubernetes layout:
2-space mappings with sequences offset inside their parent key.

Author: KubeCodec Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import Tuple

REQUIRED_FIELDS = ("apiVersion", "kind", "metadata")

# The interpreter refuses int <-> str conversions longer than INT_TEXT_LIMIT
# digits by default; MAX_NUMBER_DIGITS stays below it.
INT_TEXT_LIMIT = 4300
MAX_NUMBER_DIGITS = 4000


@dataclass(frozen=True)
class CodecConfig:
    max_depth: int = 128               # Deepest allowed list/mapping nesting
    max_values: int = 1_000_000        # Most values a single document may expand to
    max_number_digits: int = MAX_NUMBER_DIGITS  # Longest integer literal; magnitude for plain output
    required_fields: Tuple[str, ...] = REQUIRED_FIELDS
    indent_mapping: int = 2
    indent_sequence: int = 4
    indent_offset: int = 2
    width: int = 4096                  # Keeps long strings (images, URLs) on one line

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_values < 1:
            raise ValueError(f"max_values must be positive, got {self.max_values}")
        if not 1 <= self.max_number_digits <= INT_TEXT_LIMIT:
            raise ValueError(f"max_number_digits must be between 1 and {INT_TEXT_LIMIT}, got {self.max_number_digits}")
        object.__setattr__(self, "required_fields", tuple(self.required_fields))
