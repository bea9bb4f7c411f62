"""WRIML markup vocabulary: block markers, reserved tags and attributes."""

# Data block markers (matched against the whitespace-trimmed line)
BLOCK_OPEN = "^data"
BLOCK_CLOSE = "_data"

# Tag prefixes
TAG_OPEN_PREFIX = "^"
TAG_CLOSE_PREFIX = "_"

# Reserved tag mnemonics
TAG_CONTEXT = "ct"
TAG_JUDGMENT = "aj"
TAG_UNSEGMENTED = "tx"
TAG_MORPHEMES = "mb"
TAG_GLOSS = "gl"
TAG_TRANSLATION = "tr"
TAG_LITERAL = "lt"
TAG_ID = "id"
TAG_REFERENCE = "rf"  # legacy spelling of the identifier tag

# Identifier tags; the first matching line in a block wins regardless of spelling
IDENTIFIER_TAGS = (TAG_ID, TAG_REFERENCE)

# Content tags in document order
CONTENT_TAGS = (
    TAG_CONTEXT,
    TAG_JUDGMENT,
    TAG_UNSEGMENTED,
    TAG_MORPHEMES,
    TAG_GLOSS,
    TAG_TRANSLATION,
    TAG_LITERAL,
)

# Only attribute with a meaning in the core (on the context tag)
ATTR_TYPE = "type"
