"""Doc comment parsing.

Accepts both plain Python docstrings and ``/** ... */`` style blocks.
The summary runs until the first blank line or the first line ending in
a period; everything after it, up to the first tag line, is the
description. Tag lines start with ``@`` (``@deprecated``, ``@param ...``);
the Sphinx ``.. deprecated::`` directive is also recognized.
"""

import inspect
import re
from typing import Protocol

from pydantic import BaseModel

from route_swagger.errors import DocBlockError

TAG_RE = re.compile(r"^@(\w[\w-]*)")
SPHINX_DEPRECATED_RE = re.compile(r"^\.\.\s+deprecated::")


class DocBlock(BaseModel):
    summary: str = ""
    description: str = ""
    deprecated: bool = False


class DocParser(Protocol):
    def parse(self, raw: str) -> DocBlock: ...


class DocBlockParser:
    def parse(self, raw: str) -> DocBlock:
        text = self._strip_comment_markers(raw)
        lines = inspect.cleandoc(text).splitlines()

        body, tags = self._split_tags(lines)
        summary, description = self._split_summary(body)

        return DocBlock(
            summary=summary,
            description=description,
            deprecated="deprecated" in tags,
        )

    def _strip_comment_markers(self, raw: str) -> str:
        text = raw.strip()
        if not text.startswith("/**"):
            return text
        if not text.endswith("*/"):
            raise DocBlockError("Unterminated doc comment")

        text = text[3:-2]
        lines = []
        for line in text.splitlines():
            stripped = line.strip()
            if stripped.startswith("*"):
                stripped = stripped[1:].strip()
            lines.append(stripped)
        return "\n".join(lines)

    def _split_tags(self, lines: list[str]) -> tuple[list[str], set[str]]:
        """Separate body lines from the trailing tag section."""
        tags: set[str] = set()
        for i, line in enumerate(lines):
            stripped = line.strip()
            match = TAG_RE.match(stripped)
            if match or SPHINX_DEPRECATED_RE.match(stripped):
                for tag_line in lines[i:]:
                    tag_line = tag_line.strip()
                    m = TAG_RE.match(tag_line)
                    if m:
                        tags.add(m.group(1).lower())
                    elif SPHINX_DEPRECATED_RE.match(tag_line):
                        tags.add("deprecated")
                return lines[:i], tags
        return lines, tags

    def _split_summary(self, lines: list[str]) -> tuple[str, str]:
        lines = [line.rstrip() for line in lines]
        while lines and not lines[0].strip():
            lines.pop(0)

        summary_lines = []
        rest_start = len(lines)
        for i, line in enumerate(lines):
            if not line.strip():
                rest_start = i
                break
            summary_lines.append(line.strip())
            if line.endswith("."):
                rest_start = i + 1
                break

        summary = " ".join(summary_lines)
        description = "\n".join(lines[rest_start:]).strip()
        return summary, description
