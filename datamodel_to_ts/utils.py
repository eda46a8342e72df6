"""
Utility functions for the TypeScript generator.
"""


def documentation_block(documentation: str | None, indent: int = 0) -> str:
    """Convert documentation text into a JSDoc block.

    Examples:
        "A person" -> "/**\\n * A person\\n */\\n"
        "" -> ""

    Args:
        documentation: The text to wrap, possibly multi-line
        indent: Number of spaces to put before every line

    Returns:
        The block, newline terminated, or an empty string if there is no text
    """
    if not documentation:
        return ""
    indentation = " " * indent
    lines = ["/**", *(" " + f"* {line}".strip() for line in documentation.split("\n")), " */"]
    return "\n".join(f"{indentation}{line}" for line in lines) + "\n"


def line_comment(text: str) -> str:
    """Prefix every line of text with `// `."""
    return "\n".join(f"// {line}" for line in text.split("\n"))
