# src/markup_kit/observability/names.py

"""Standard metric names for markup-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration (whole parse_markdown_with_mentions call)
PARSE_DURATION = "markup_parse_duration"

# Counters
MENTIONS_RECOGNIZED = "markup_mentions_recognized"
CHECKBOXES_RECOGNIZED = "markup_checkboxes_recognized"
CHUNKS_CREATED = "markup_chunks_created"


# ============================================================================
# Sanitizer Metrics
# ============================================================================

# Duration
SANITIZE_DURATION = "markup_sanitize_duration"
