"""JSON Schema draft identifiers and their meta-schema URLs."""

from __future__ import annotations

from .errors import ConfigurationError

DRAFT_URLS: dict[int, str] = {
    4: "http://json-schema.org/draft-04/schema#",
    6: "http://json-schema.org/draft-06/schema#",
    7: "http://json-schema.org/draft-07/schema#",
    2019: "https://json-schema.org/draft/2019-09/schema",
    2020: "https://json-schema.org/draft/2020-12/schema",
}


def resolve_schema_url(draft: int) -> str:
    """Return the `$schema` URL for a draft identifier."""
    if isinstance(draft, bool) or draft not in DRAFT_URLS:
        supported = ", ".join(str(value) for value in DRAFT_URLS)
        raise ConfigurationError(f"Invalid draft version: {draft!r} (supported: {supported}).")
    return DRAFT_URLS[draft]
