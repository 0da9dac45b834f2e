def split_lines(text: str) -> list[str]:
    """
    Split a text blob on newlines, dropping empty and whitespace-only lines. Order is kept.
    """
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]
