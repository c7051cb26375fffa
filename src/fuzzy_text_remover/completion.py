from __future__ import annotations

import re

# Words joined by whitespace, optionally with a parenthesis right before the
# gap, e.g. "07881) 618299". Stray edge punctuation falls outside the match.
WORD_RUN_PATTERN = re.compile(r"\w+(?:\(?\)?\s+\w+)*", re.UNICODE)


def complete_span(text: str, begin: int, end: int) -> str:
    """
    Expand ``text[begin:end]`` outward to whole-word boundaries and return the
    first clean run of words inside the expanded span, or "" if there is none.
    """
    while begin > 0 and text[begin : begin + 1].isalnum():
        begin -= 1
    # Stopped on a boundary character; step past it. At position 0 the
    # boundary character (if any) stays in the span.
    if begin != 0:
        begin += 1

    while end < len(text) - 1 and text[end : end + 1].isalnum():
        end += 1

    match = WORD_RUN_PATTERN.search(text[begin:end])
    if match is None:
        return ""
    return match.group(0)
