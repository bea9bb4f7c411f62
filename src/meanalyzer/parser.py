"""Field parser: turn one data block into a Record.

Each record field is bound to one or more tag mnemonics through TAG_RULES, a
mapping from field name to a compiled capturing rule. A rule matches a whole
trimmed line of the form::

    ^gl JOHN EAT-3SG ART APPLE _gl
    ^ct_type="out-of-the-blue" This sentence was said spontaneously. _ct

Attributes (``_key="value"``) sit directly after the mnemonic, before the
first whitespace. For every field the first matching line in the block wins;
later duplicates are ignored.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Sequence

from .blocks import Block
from .constants import (
    ATTR_TYPE,
    IDENTIFIER_TAGS,
    TAG_CONTEXT,
    TAG_GLOSS,
    TAG_JUDGMENT,
    TAG_LITERAL,
    TAG_MORPHEMES,
    TAG_TRANSLATION,
    TAG_UNSEGMENTED,
)
from .models import Record

_ATTR_PATTERN = re.compile(r'_(?P<key>[A-Za-z][\w-]*?)="(?P<value>[^"]*)"')


def _compile_rule(tags: Sequence[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(tag) for tag in tags)
    return re.compile(
        r"^\^(?P<tag>" + alternatives + r")"
        r'(?P<attrs>(?:_[A-Za-z][\w-]*="[^"]*")*)'
        r"(?:\s+(?P<value>.*?))?"
        r"\s+_(?P=tag)$"
    )


# Record field -> tag mnemonics accepted for it
FIELD_TAGS: Dict[str, tuple[str, ...]] = {
    "context": (TAG_CONTEXT,),
    "acceptability_judgment": (TAG_JUDGMENT,),
    "unsegmented_text": (TAG_UNSEGMENTED,),
    "morpheme_line": (TAG_MORPHEMES,),
    "gloss_line": (TAG_GLOSS,),
    "free_translation": (TAG_TRANSLATION,),
    "literal_translation": (TAG_LITERAL,),
    "identifier": IDENTIFIER_TAGS,
}

TAG_RULES: Dict[str, re.Pattern] = {name: _compile_rule(tags) for name, tags in FIELD_TAGS.items()}


def parse_attributes(attrs: str | None) -> dict[str, str]:
    """Parse an attribute run such as ``_type="bridging"`` into a dict.

    Repeated keys keep their first value.
    """
    result: dict[str, str] = {}
    if not attrs:
        return result
    for match in _ATTR_PATTERN.finditer(attrs):
        result.setdefault(match.group("key"), match.group("value"))
    return result


def find_tag(lines: Sequence[str], rule: re.Pattern) -> re.Match | None:
    """Return the first line match for a rule, or None."""
    for line in lines:
        match = rule.match(line.strip())
        if match:
            return match
    return None


def extract_fields(
    lines: Sequence[str], rules: Mapping[str, re.Pattern] = TAG_RULES
) -> dict[str, re.Match | None]:
    """Run every rule over the lines and keep the first match per field."""
    return {name: find_tag(lines, rule) for name, rule in rules.items()}


def _payload(match: re.Match | None) -> str | None:
    if match is None:
        return None
    return (match.group("value") or "").strip()


def parse_block(block: Block | Sequence[str]) -> Record:
    """Parse one block into a Record.

    Missing tags leave the corresponding field as None; this is never an
    error here. Parsing is pure: equal input gives equal records.

    Args:
        block: A Block from extract_blocks, or a bare sequence of lines.

    Returns:
        Record with trimmed payloads and the block's verbatim lines.
    """
    if isinstance(block, Block):
        lines: Sequence[str] = block.lines
        line_number: int | None = block.line_number
    else:
        lines = tuple(block)
        line_number = None

    matches = extract_fields(lines)
    context_match = matches["context"]
    context_type = None
    if context_match is not None:
        context_type = parse_attributes(context_match.group("attrs")).get(ATTR_TYPE)

    return Record(
        identifier=_payload(matches["identifier"]),
        context=_payload(context_match),
        context_type=context_type,
        acceptability_judgment=_payload(matches["acceptability_judgment"]),
        unsegmented_text=_payload(matches["unsegmented_text"]),
        morpheme_line=_payload(matches["morpheme_line"]),
        gloss_line=_payload(matches["gloss_line"]),
        free_translation=_payload(matches["free_translation"]),
        literal_translation=_payload(matches["literal_translation"]),
        raw_lines=tuple(lines),
        line=line_number,
    )
