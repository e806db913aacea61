"""
Spell amounts out in French for the "Arrêté la présente facture" line.

Traditional spelling: "vingt et un", "soixante et onze", "quatre-vingts",
"deux cents", "mille" (invariable), "deux millions".
"""
from decimal import Decimal
from typing import Union

UNITS = [
    "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
]

TENS = {2: "vingt", 3: "trente", 4: "quarante", 5: "cinquante", 6: "soixante"}

SCALES = (
    (10 ** 9, "milliard", "milliards"),
    (10 ** 6, "million", "millions"),
)


def _below_100(n: int, final: bool = True) -> str:
    if n <= 16:
        return UNITS[n]
    if n < 20:
        return f"dix-{UNITS[n - 10]}"

    tens, unit = divmod(n, 10)
    if tens == 7:
        return "soixante et onze" if n == 71 else f"soixante-{_below_100(n - 60)}"
    if tens == 8:
        if unit == 0:
            # "quatre-vingts" loses its s when followed by "mille"
            return "quatre-vingts" if final else "quatre-vingt"
        return f"quatre-vingt-{UNITS[unit]}"
    if tens == 9:
        return f"quatre-vingt-{_below_100(n - 80)}"

    if unit == 0:
        return TENS[tens]
    if unit == 1:
        return f"{TENS[tens]} et un"
    return f"{TENS[tens]}-{UNITS[unit]}"


def _below_1000(n: int, final: bool = True) -> str:
    hundreds, rest = divmod(n, 100)
    parts = []
    if hundreds == 1:
        parts.append("cent")
    elif hundreds > 1:
        plural = "s" if rest == 0 and final else ""
        parts.append(f"{UNITS[hundreds]} cent{plural}")
    if rest:
        parts.append(_below_100(rest, final))
    return " ".join(parts)


def number_to_words(number: Union[int, Decimal, float]) -> str:
    """Spell the integer part of *number* in French"""
    n = int(number)
    if n == 0:
        return UNITS[0]
    if n < 0:
        return f"moins {number_to_words(-n)}"

    parts = []
    for value, singular, plural in SCALES:
        count, n = divmod(n, value)
        if count:
            spelled = number_to_words(count) if count >= 1000 else _below_1000(count)
            parts.append(f"{spelled} {singular if count == 1 else plural}")

    thousands, n = divmod(n, 1000)
    if thousands == 1:
        parts.append("mille")
    elif thousands:
        parts.append(f"{_below_1000(thousands, final=False)} mille")

    if n:
        parts.append(_below_1000(n))
    return " ".join(parts)


def amount_in_words(amount: Union[int, Decimal, float], currency: str = "GNF") -> str:
    words = number_to_words(amount)
    return f"{words[:1].upper()}{words[1:]} {currency}".strip()
