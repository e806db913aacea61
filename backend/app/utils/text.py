import re

_WHITESPACE = re.compile(r"\s+")


def normalize_text(value: str) -> str:
    """
    Trim, collapse inner whitespace and Proper Case every word

    "  aBdouL   HamId  " -> "Abdoul Hamid"
    """
    if not value:
        return ""
    words = _WHITESPACE.sub(" ", value.strip()).lower().split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)
