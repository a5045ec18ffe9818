# word counting + search matching shared by the editor, cards and dashboard
from typing import Any

def word_count(text: str | None) -> int:
    """Whitespace-delimited tokens of the trimmed text. Blank text counts as 0."""
    return len((text or "").split())

def _field(obj: Any, name: str):
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)

def matches_search(note: Any, term: str) -> bool:
    """Case-insensitive substring match over title, content and summary."""
    needle = (term or "").lower()
    if not needle:
        return True
    for name in ("title", "content", "summary"):
        value = _field(note, name)
        if value and needle in value.lower():
            return True
    return False
