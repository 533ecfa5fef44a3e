"""Input loading exports."""

from .document_fetcher import InputError, fetch_input, is_url, load_inputs

__all__ = [
    "InputError",
    "fetch_input",
    "is_url",
    "load_inputs",
]
