"""Small query helpers shared by repositories."""


def escape_like(value: str, escape_char: str = "\\") -> str:
    """Escape LIKE wildcards so ``value`` is matched literally."""
    return (
        value.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )


def contains_pattern(value: str) -> str:
    """LIKE pattern matching ``value`` anywhere in the column."""
    return f"%{escape_like(value)}%"
