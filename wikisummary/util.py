# wikisummary/util.py
import re
from typing import Optional

WORD_RE = re.compile(r"[\w'-]+")


def word_at_point(text: str, point: int) -> Optional[str]:
    """Word under the point, or the one ending right before it."""
    point = max(0, min(point, len(text)))
    for m in WORD_RE.finditer(text):
        if m.start() <= point <= m.end():
            return m.group(0).strip("'-") or None
        if m.start() > point:
            break
    return None
