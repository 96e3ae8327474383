def normalize_text(text: str) -> str:
    """Normalize text for matching.

    Only case is folded. Whitespace and punctuation are significant.

    Example: "Target Field Station Platform 2" -> "target field station platform 2"
    """
    return text.casefold()
