"""Default values and render sentinels."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Render-time sentinels for absent values
UNSPECIFIED_CONTEXT_TYPE = "[unspecified]"
MSG_MISSING_CONTEXT = "[Warning: Empty or missing context]"
MSG_MISSING_MORPHEMES = "[Error: Empty or missing morpheme break line]"
MSG_MISSING_GLOSS = "[Error: Empty or missing gloss line]"
MSG_MISSING_ID = "[Error: Empty or missing ID]"

# Console placeholders for the contexts listing
MSG_NO_CONTEXT = "[no context]"
MSG_NO_ID = "[no id]"

# Console separator between full matched blocks
REPORT_SEPARATOR = "=" * 40

# Environment variables read by AnalyzerConfig.from_env
ENV_EXPORT_FORMAT = "MEANALYZER_EXPORT_FORMAT"
ENV_STRICT_BLOCKS = "MEANALYZER_STRICT_BLOCKS"
ENV_ENCODING = "MEANALYZER_ENCODING"
ENV_REPORT_DIR = "MEANALYZER_REPORT_DIR"

# Values accepted as "true" for boolean environment variables
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

# Value meaning "do not export"
EXPORT_FORMAT_NONE = "none"
