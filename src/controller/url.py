"""Repository URL normalization."""


def normalize_url(raw: str | None) -> str | None:
    """Convert raw field text to an optional repository URL.

    Blank or whitespace-only text yields None. Anything else is returned
    verbatim (not stripped) so the displayed text is preserved.

    Args:
        raw: Text from the URL input field

    Returns:
        The raw text, or None if there is no usable text
    """
    if raw is None or not raw.strip():
        return None
    return raw
