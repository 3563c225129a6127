#!/usr/bin/env python3
"""
KUBECODEC SPLITTER - Document Boundaries
----------------------------------------
Cuts a multi-document YAML stream into one string per document. Only a
line holding nothing but the `---` marker (plus trailing whitespace)
starts a new document, so values such as `foo---bar` are left alone.

Directives (`%YAML 1.2`, `%TAG ...`) sit before the `---` that opens
their document; they are kept together with that document so each
fragment still parses on its own.

Author: KubeCodec Team
Date: 2026-10-19
"""

import re
from typing import List

# A separator line: start of input or after a newline, `---`, optional
# trailing blanks, then end of line.
SEPARATOR_PATTERN = re.compile(r'^---[ \t]*\r?$', re.MULTILINE)
LEADING_BLANK_LINES = re.compile(r'\A(?:[ \t]*\r?\n)+')
DIRECTIVE_LINE = re.compile(r'^%\S')
COMMENT_LINE = re.compile(r'^[ \t]*(?:#.*)?$')


class DocumentSplitter:
    """Partitions raw text into ordered document fragments."""

    def _trim(self, fragment: str) -> str:
        # Only blank lines are stripped from the front; the first line's
        # indentation belongs to the document.
        return LEADING_BLANK_LINES.sub('', fragment).rstrip()

    def _is_directive_block(self, fragment: str) -> bool:
        lines = fragment.splitlines()
        return (any(DIRECTIVE_LINE.match(line) for line in lines)
                and all(DIRECTIVE_LINE.match(line) or COMMENT_LINE.match(line) for line in lines))

    def split(self, raw_text: str) -> List[str]:
        text = raw_text.lstrip('\ufeff')
        fragments = []
        directives = None
        for fragment in SEPARATOR_PATTERN.split(text):
            trimmed = self._trim(fragment)
            if not trimmed.strip():
                continue
            if directives is not None:
                trimmed = f"{directives}\n---\n{trimmed}"
                directives = None
            elif self._is_directive_block(trimmed):
                directives = trimmed
                continue
            fragments.append(trimmed)
        if directives is not None:
            # Directives with no document after them; the loader reports it.
            fragments.append(directives)
        return fragments


def split_documents(raw_text: str) -> List[str]:
    """Convenience wrapper around DocumentSplitter.split."""
    return DocumentSplitter().split(raw_text)
