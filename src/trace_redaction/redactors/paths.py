"""
Compilation of dotted redaction paths into segments.

Path syntax:
- Dot-separated segments, e.g. "attributes.password" or "attributes.*.token".
- "*" is a wildcard segment. Its meaning depends on its position, see
  `trace_redaction.redactors.impl.path_rule_redactor`.
- "key[]" marks a key whose value is expected to be a list. Lists are always
  traversed transparently, so the suffix is documentary and "key[]" compiles to
  the same segment as "key". Only the first "[]" is stripped, so "m[][]" is
  the literal "m[]". A bare "[]" compiles to nothing.

Examples:
- compile_path("entries[].data.password") => (literal "entries", literal "data", literal "password")
- compile_path("*.password") => (wildcard, literal "password")
- compile_path("a..b") => (literal "a", literal "", literal "b"); the empty segment never matches.
"""
from typing import List, Tuple

from .types import ARRAY_SUFFIX, WILDCARD_TOKEN, PathSegment

WILDCARD_SEGMENT = PathSegment(kind="wildcard")


def compile_path(path: str) -> Tuple[PathSegment, ...]:
    segments: List[PathSegment] = []
    for token in path.split("."):
        if token == WILDCARD_TOKEN:
            segments.append(WILDCARD_SEGMENT)
        elif ARRAY_SUFFIX in token:
            base_name = token.replace(ARRAY_SUFFIX, "", 1)
            if base_name:
                segments.append(PathSegment(kind="literal", key=base_name))
        else:
            segments.append(PathSegment(kind="literal", key=token))
    return tuple(segments)
