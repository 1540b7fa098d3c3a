"""Review text preprocessing."""

import re

BREAK_OR_SPACE_RE = re.compile(r"(?:<br\s*/?>|\s)+", re.IGNORECASE)


def normalize_text(raw: str) -> str:
    """Canonicalize extracted review text before scoring.

    Double quotes are dropped first, then any run of whitespace and literal
    ``<br>`` markup collapses to one space and the ends are trimmed. Applying
    it twice gives the same result as applying it once.
    """
    text = (raw or "").replace('"', "")
    # Removing a tag can join its neighbours into a new one ("<br<br>>" -> "<br >")
    while True:
        collapsed = BREAK_OR_SPACE_RE.sub(" ", text)
        if collapsed == text:
            break
        text = collapsed
    return text.strip()
