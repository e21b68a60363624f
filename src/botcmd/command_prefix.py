import string

# Each rule is a tuple: (lambda predicate returning True on error, error_message)
# These rules assume `prefix` is already confirmed to be a non-empty string.
_PREFIX_VALIDATION_RULES = [
    (lambda p: len(p) != 1, "command prefix must be exactly one character"),
    (lambda p: p.isspace(), "command prefix cannot be whitespace"),
    (
        lambda p: p not in string.printable,
        "command prefix must be a printable character",
    ),
    (lambda p: p.isalnum(), "command prefix cannot be a letter or digit"),
    (lambda p: p == '"', "command prefix cannot be the quote character"),
]


def validate_command_prefix(prefix: str) -> str | None:
    """Return error message if prefix is invalid, otherwise None."""
    if not isinstance(prefix, str) or not prefix:
        return "command prefix must be a non-empty string"

    for check, message in _PREFIX_VALIDATION_RULES:
        if check(prefix):  # type: ignore[no-untyped-call]
            return message

    return None
