"""Password generation strategies.

Every function takes an optional *rng* (anything with ``choice`` and
``randrange``, e.g. :class:`random.Random`).  The default draws from the
operating system via :class:`secrets.SystemRandom`.
"""

import secrets

from .log import get_logger
from .options import (
    DIGITS,
    EMOJIS,
    LOWERCASE,
    MEMORABLE_WORDS,
    SYMBOLS,
    UPPERCASE,
    GraphicalOptions,
    PasswordOptions,
    pattern_code,
)

logger = get_logger(__name__)

_system_random = secrets.SystemRandom()

HYBRID_TEXT_PERCENT = 70
HYBRID_ICON_LIMIT = 3
HYBRID_PATTERN_MARKER = "Pattern"


def build_charset(options: PasswordOptions) -> str:
    """Return the alphabet implied by the enabled character classes."""
    charset = LOWERCASE
    if options.uppercase:
        charset += UPPERCASE
    if options.digits:
        charset += DIGITS
    if options.symbols:
        charset += SYMBOLS
    if options.emojis:
        charset += EMOJIS
    return charset


def generate_random(options: PasswordOptions, rng=None) -> str:
    """Draw ``options.length`` characters uniformly from the charset."""
    rng = rng or _system_random
    charset = build_charset(options)
    return "".join(rng.choice(charset) for _ in range(options.length))


def word_count(length: int) -> int:
    return max(2, length // 6)


def generate_memorable(options: PasswordOptions, rng=None) -> str:
    """Concatenate dictionary words, then optional number/symbol/emoji.

    The result is cut to ``options.length``; short lengths may cut into the
    words themselves.
    """
    rng = rng or _system_random

    words = []
    for i in range(word_count(options.length)):
        word = rng.choice(MEMORABLE_WORDS)
        if options.uppercase and i == 0:
            word = word[0].upper() + word[1:]
        words.append(word)

    result = "".join(words)
    if options.digits:
        result += f"{rng.randrange(100):02d}"
    if options.symbols:
        result += rng.choice(SYMBOLS)
    if options.emojis:
        result += rng.choice(EMOJIS)

    return result[: options.length]


def generate_text(options: PasswordOptions, rng=None) -> str:
    if options.memorable:
        return generate_memorable(options, rng)
    return generate_random(options, rng)


def generate_graphical(graphical: GraphicalOptions) -> str:
    """Selected icons followed by the serialised pattern cells."""
    return "".join(graphical.icons) + pattern_code(graphical.grid)


def generate_hybrid(
    options: PasswordOptions,
    graphical: GraphicalOptions,
    rng=None,
) -> str:
    """Shortened text password plus up to three icons and a pattern marker.

    Icons are kept or dropped whole, so a glyph never loses its variation
    selector to the final cut.
    """
    text = generate_text(options, rng)
    result = text[: options.length * HYBRID_TEXT_PERCENT // 100]
    for icon in graphical.icons[:HYBRID_ICON_LIMIT]:
        if len(result) + len(icon) > options.length:
            break
        result += icon
    if graphical.has_pattern:
        result += HYBRID_PATTERN_MARKER
    return result[: options.length]


def generate_password(
    options: PasswordOptions | None = None,
    graphical: GraphicalOptions | None = None,
    *,
    rng=None,
) -> str:
    """Generate a password for the current options.

    Graphical and hybrid modes with nothing selected fall back to the plain
    text result.
    """
    options = options or PasswordOptions()
    graphical = graphical or GraphicalOptions()

    mode = graphical.mode
    if mode != "text" and graphical.is_empty:
        mode = "text"

    if mode == "graphical":
        password = generate_graphical(graphical)
    elif mode == "hybrid":
        password = generate_hybrid(options, graphical, rng)
    else:
        password = generate_text(options, rng)

    logger.debug(
        "password_generated",
        mode=mode,
        requested_mode=graphical.mode,
        memorable=options.memorable,
        length=len(password),
    )
    return password
