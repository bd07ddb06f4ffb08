"""Usage text for the escolors command."""

__all__ = ["get_help"]

_COMMANDS = (
    ("--es-to-hex <file>", "Reads Endless Sky colors from the file and prints them as 24 bit hexadecimal HTML color codes."),
    ("--hex-to-es <file>", "Reads 24 bit hexadecimal HTML colors from the file and prints them in the Endless Sky color format."),
    ("<r#> <g#> <b#> [<a#>]", "Converts the given Endless Sky color to HTML format."),
    ("#<rr><gg><bb>", "Converts the given HTML color to Endless Sky format."),
)

_OPTIONS = (
    ("--strict", "Reject malformed hex colors instead of reading bad digits as 0."),
    ("--debug <logfile>", "Enable debug logging, also written to <logfile>."),
    ("-h, --help", "Show this help."),
)


def get_help() -> str:
    """Return the usage documentation."""
    lines = [
        "Syntax: escolors [options] <command>",
        "",
        "Endless Sky format: color <name> <r#> <g#> <b#> [<a#>]",
        "24 bit hex format: color <name> #<rr><gg><bb>",
        "",
        "Commands:",
    ]
    lines.extend(f" {name:24s} {doc}" for name, doc in _COMMANDS)
    lines.append("")
    lines.append("Options:")
    lines.extend(f" {name:24s} {doc}" for name, doc in _OPTIONS)
    return "\n".join(lines)
