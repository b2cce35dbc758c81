"""Lenient ``key: value`` frontmatter parsing for skill documents.

A document may begin with a header block:
```
---
name: my-skill
description: Brief description
---
Body text...
```
Header lines are split on their first colon only; there is no YAML
interpretation, so values keep any further colons verbatim and malformed
headers simply yield no metadata.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)


@dataclass
class Frontmatter:
    """Parsed document: header metadata plus the remaining body."""

    meta: Dict[str, str] = field(default_factory=dict)
    body: str = ""


def parse_frontmatter(text: str) -> Frontmatter:
    """Split a document into header metadata and body.

    If the text does not start with a complete header block, the metadata is
    empty and the body is the text unchanged.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return Frontmatter(meta={}, body=text)

    header, body = match.group(1), match.group(2)
    meta: Dict[str, str] = {}

    for line in header.split("\n"):
        key, sep, value = line.partition(":")
        if not key or not sep:
            continue
        meta[key.strip()] = value.strip()

    return Frontmatter(meta=meta, body=body)


def dump_frontmatter(meta: Mapping[str, str], body: str) -> str:
    """Serialize metadata and body back into a document with a header block."""
    lines = [f"{key}: {value}" for key, value in meta.items()]
    return "---\n" + "\n".join(lines) + "\n---\n" + body
