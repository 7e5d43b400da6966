"""Heuristic password strength scoring.

This is an illustrative score for the widget, not an entropy model, and it
makes no security guarantee.
"""

import math
import re

from .options import GraphicalOptions


# Points needed for a full score; with every criterion met the total is 9,
# so the mapped score is capped at 100.
FULL_SCORE_POINTS = 8

_CLASS_SIZES = {
    "lowercase": 26,
    "uppercase": 26,
    "digits": 10,
    "symbols": 32,
}
ICON_WEIGHT = 100
PATTERN_WEIGHT = 1000

# (threshold in bits, score) checked top-down; anything lower scores 25.
_ENTROPY_STEPS = [(50, 100), (35, 75), (25, 50)]
_ENTROPY_FLOOR = 25

LEVELS = [
    # (upper bound inclusive, label, colour)
    (40, "Weak", "#d32f2f"),
    (70, "Medium", "#fbc02d"),
    (100, "Strong", "#388e3c"),
]

HINTS = {
    "Weak": "Consider using more character types, increasing length, "
            "or adding graphical elements.",
    "Medium": "Good password! Consider adding graphical elements for "
              "enhanced security.",
    "Strong": "Excellent! This password provides strong security protection.",
}


def char_classes(password: str) -> dict[str, bool]:
    """Which character classes appear in *password*.

    Anything outside ASCII letters and digits, emoji included, counts as a
    symbol.
    """
    return {
        "lowercase": bool(re.search(r"[a-z]", password)),
        "uppercase": bool(re.search(r"[A-Z]", password)),
        "digits":    bool(re.search(r"[0-9]", password)),
        "symbols":   bool(re.search(r"[^A-Za-z0-9]", password)),
    }


def entropy_score(entropy: float) -> int:
    for threshold, score in _ENTROPY_STEPS:
        if entropy > threshold:
            return score
    return _ENTROPY_FLOOR


def classify(score: float) -> tuple[str, str]:
    """Return ``(label, colour)`` for a 0-100 score."""
    for bound, label, color in LEVELS:
        if score <= bound:
            return label, color
    return LEVELS[-1][1], LEVELS[-1][2]


def score_strength(
    password: str,
    graphical: GraphicalOptions | None = None,
) -> dict:
    """Score *password* together with the current graphical selection.

    Returns a dict with keys:
        score    -- float 0-100
        label    -- "Weak", "Medium" or "Strong"
        color    -- hex colour for the label
        entropy  -- float (bits, rounded)
        points   -- int, satisfied criteria (0-9)
        criteria -- dict[str, bool]
        hint     -- str
    """
    graphical = graphical or GraphicalOptions()
    classes = char_classes(password)

    criteria = {
        "length_8": len(password) >= 8,
        "length_12": len(password) >= 12,
        "length_16": len(password) >= 16,
        **classes,
        "icons": bool(graphical.icons),
        "pattern": graphical.has_pattern,
    }
    points = sum(criteria.values())

    alphabet = sum(size for name, size in _CLASS_SIZES.items() if classes[name])
    alphabet += len(graphical.icons) * ICON_WEIGHT
    if graphical.has_pattern:
        alphabet += PATTERN_WEIGHT

    entropy = math.log2(alphabet) * len(password) if alphabet else 0.0

    mapped = min(100, points / FULL_SCORE_POINTS * 100)
    score = float(max(entropy_score(entropy), mapped))
    label, color = classify(score)

    return {
        "score": score,
        "label": label,
        "color": color,
        "entropy": round(entropy, 1),
        "points": points,
        "criteria": criteria,
        "hint": HINTS[label],
    }
