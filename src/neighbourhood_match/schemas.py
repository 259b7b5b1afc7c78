"""Schema definitions for match run outputs.

These define the expected columns of the written artefacts, enabling validation
and clear documentation of data contracts.
"""

from __future__ import annotations

# Scored matches CSV, one row per neighbourhood in presentation order
MATCH_OUTPUT_COLUMNS = (
    "rank",
    "neighbourhood_id",
    "name",
    "city",
    "state",
    "overall_score",
    "lifestyle_score",
    "demographics_score",
    "housing_score",
    "safety_score",
    "climate_score",
    "commute_score",
    "median_rent",
    "median_home_price",
    "raw_safety_score",
    "match_reasons",  # pipe-separated, at most four
)

# Explain JSON entry keys
MATCH_EXPLAIN_KEYS = (
    "neighbourhood_id",
    "name",
    "overall_score",
    "reasons",
    "category_scores",
)


def validate_columns(df_columns: list[str], required: frozenset[str], artefact_name: str) -> None:
    """Validate that DataFrame has required columns.

    Args:
        df_columns: List of column names from DataFrame.
        required: Set of required column names.
        artefact_name: Name of the artefact for error messages.

    Raises:
        ValueError: If required columns are missing.
    """
    missing = required - set(df_columns)
    if missing:
        raise ValueError(f"{artefact_name}: Missing required columns: {sorted(missing)}")
