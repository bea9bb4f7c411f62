"""Output naming templates and directory names."""

from pathlib import Path

# Suffix templates (used as f"{stem}{SUFFIX}{ext}")
SUFFIX_MINIMAL_PAIRS = "-sorted"
SUFFIX_CONTEXT_VARIANTS = "-ctvariants"

# Search report templates (formatted with the search target)
TEMPLATE_MORPHEME_REPORT = "_morpheme-{target}_contexts_report"
TEMPLATE_GLOSS_REPORT = "_gloss-{target}_contexts_report"

# Directory for search reports
REPORT_DIR = Path("export")

# File extensions per export format value
EXT_WRIML = ".wriml"
EXT_TXT = ".txt"
EXT_RMD = ".Rmd"
EXT_TEX = ".tex"
EXT_CSV = ".csv"
