"""Regex syntax reference and the component breakdown of the email pattern."""

from dataclasses import dataclass

REGEX_SYNTAX: dict[str, dict[str, str]] = {
    "Anchors": {
        "^": "Start of string (or line in multiline mode)",
        "$": "End of string (or line in multiline mode)",
        "\\A": "Start of string only",
        "\\Z": "End of string only",
    },
    "Quantifiers": {
        "*": "0 or more",
        "+": "1 or more",
        "?": "0 or 1",
        "{n}": "Exactly n times",
        "{n,}": "n or more times",
        "{n,m}": "Between n and m times",
    },
    "Character Classes": {
        ".": "Any character (except newline)",
        "\\d": "Digit [0-9]",
        "\\D": "Non-digit",
        "\\w": "Word character [a-zA-Z0-9_]",
        "\\W": "Non-word character",
        "\\s": "Whitespace",
        "\\S": "Non-whitespace",
    },
    "Flags": {
        "i": "Case-insensitive matching",
        "g": "Global search, find every match instead of the first",
        "m": "Multiline, ^ and $ match at line breaks",
        "s": "Dot matches newline",
    },
    "Grouping and Capturing": {
        "(...)": "Capturing group",
        "(?:...)": "Non-capturing group",
        "(?P<name>...)": "Named capturing group",
        "a|b": "Alternation, a or b",
    },
    "Bracket Expressions": {
        "[abc]": "Any of a, b, or c",
        "[^abc]": "Not a, b, or c",
        "[a-z]": "Any character in the range a to z",
        "[a-z0-9_.-]": "Ranges and literals combined; a trailing '-' is literal",
    },
    "Greedy and Lazy Matching": {
        "*": "Greedy, as many as possible",
        "*?": "Lazy, as few as possible",
        "+?": "Lazy one or more",
        "{n,m}?": "Lazy between n and m times",
    },
    "Boundaries": {
        "\\b": "Word boundary",
        "\\B": "Not a word boundary",
    },
    "Back-references": {
        "\\1": "Text matched by group 1",
        "(?P=name)": "Text matched by the named group",
    },
    "Look-around": {
        "(?=...)": "Positive lookahead",
        "(?!...)": "Negative lookahead",
        "(?<=...)": "Positive lookbehind",
        "(?<!...)": "Negative lookbehind",
    },
}


@dataclass(frozen=True)
class PatternComponent:
    """One token of the email pattern with its explanation."""

    token: str
    category: str
    description: str


EMAIL_PATTERN_BREAKDOWN: tuple[PatternComponent, ...] = (
    PatternComponent("^", "Anchors", "The match must start at the beginning of the string"),
    PatternComponent("(", "Grouping and Capturing", "Open group 1: the local part"),
    PatternComponent(
        "[a-z0-9_.-]",
        "Bracket Expressions",
        "A lowercase letter, digit, underscore, dot or hyphen",
    ),
    PatternComponent("+", "Quantifiers", "One or more of the preceding characters"),
    PatternComponent(")", "Grouping and Capturing", "Close group 1"),
    PatternComponent("@", "Literal", "The literal '@' separating local part and domain"),
    PatternComponent("(", "Grouping and Capturing", "Open group 2: the domain name"),
    PatternComponent(
        "[\\da-z.-]",
        "Bracket Expressions",
        "A digit, lowercase letter, dot or hyphen",
    ),
    PatternComponent("+", "Quantifiers", "One or more of the preceding characters"),
    PatternComponent(")", "Grouping and Capturing", "Close group 2"),
    PatternComponent("\\.", "Literal", "An escaped, literal dot before the top-level domain"),
    PatternComponent("(", "Grouping and Capturing", "Open group 3: the top-level domain"),
    PatternComponent("[a-z.]", "Bracket Expressions", "A lowercase letter or dot"),
    PatternComponent("{2,6}", "Quantifiers", "Between two and six of the preceding characters"),
    PatternComponent(")", "Grouping and Capturing", "Close group 3"),
    PatternComponent("$", "Anchors", "The match must end at the end of the string"),
)

EMAIL_PATTERN_FLAGS: dict[str, str] = {
    "i": "Case-insensitive: uppercase letters match the lowercase ranges",
}

def breakdown_source() -> str:
    """Reassemble the pattern text from its components."""
    return "".join(component.token for component in EMAIL_PATTERN_BREAKDOWN)


def lookup(category: str) -> tuple[str, dict[str, str]]:
    """Find a syntax category by name, ignoring case.

    Args:
        category: Category name, e.g. 'anchors' or 'Look-around'.

    Returns:
        The canonical category name and its token descriptions.

    Raises:
        KeyError: If no category has that name.
    """
    wanted = category.strip().lower()
    for name, entries in REGEX_SYNTAX.items():
        if name.lower() == wanted:
            return name, entries
    raise KeyError(category)
