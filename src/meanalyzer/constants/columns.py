"""DataFrame column name constants for the tabular record view."""

IDENTIFIER = "identifier"
CONTEXT_TYPE = "context_type"
CONTEXT = "context"
JUDGMENT = "judgment"
UNSEGMENTED = "unsegmented"
MORPHEMES = "morphemes"
GLOSS = "gloss"
TRANSLATION = "translation"
LITERAL = "literal_translation"
GLOSS_TOKEN_COUNT = "gloss_token_count"
LINE = "line"
GROUP = "group"

RECORD_COLUMNS = [
    IDENTIFIER,
    CONTEXT_TYPE,
    CONTEXT,
    JUDGMENT,
    UNSEGMENTED,
    MORPHEMES,
    GLOSS,
    TRANSLATION,
    LITERAL,
    GLOSS_TOKEN_COUNT,
    LINE,
]
