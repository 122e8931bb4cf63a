"""
Word wrapping for description comments.
"""


def break_text(text: str, width: int) -> list[str]:
    """
    Greedily wrap ``text`` into lines no longer than ``width``.

    Words are never split: a word longer than ``width`` gets a line of its
    own. Whitespace runs collapse to single spaces.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    lines: list[str] = []
    line = ""
    for word in text.split():
        if not line:
            line = word
        elif len(line) + 1 + len(word) > width:
            lines.append(line)
            line = word
        else:
            line = f"{line} {word}"

    if line:
        lines.append(line)

    return lines
