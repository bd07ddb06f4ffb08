"""escolors - command line entry point."""

import sys
from collections.abc import Callable

from .constants import HEX_PREFIX
from .converter import format_fraction, fractions_to_hex, hex_to_fractions
from .datafile import load_data_file
from .help import get_help
from .logging_setup import get_logger, init_logger
from .models import ColorError, DataNode, ExitCode
from .records import convert_es_nodes, convert_html_nodes
from .state import options

__all__ = ["dispatch", "main", "use_param"]

_MAX_INLINE_VALUES = 4  # r g b a


def use_param(args: list[str], txt: str) -> str:
    """Check if parameter `txt` is in `args`.

    if found, removes it from `args` & returns the argument value
    """
    v = ""
    if txt in args:
        i = args.index(txt)
        v = args[i + 1] if i + 1 < len(args) else ""
        del args[i : i + 2]
    return v


def use_flag(args: list[str], txt: str) -> bool:
    """Remove every occurrence of the `txt` flag from `args`, telling if there was one."""
    found = txt in args
    args[:] = [a for a in args if a != txt]
    return found


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def convert_file(path: str, converter: Callable[[list[DataNode]], list[str]]) -> ExitCode:
    """Load the data file at `path` and print the converted colors."""
    log = get_logger("command")
    try:
        nodes = load_data_file(path)
    except (OSError, UnicodeDecodeError) as e:
        log.critical("Can't read %s: %s", path, e)
        return ExitCode.FILE_ERROR
    _print_lines(converter(nodes))
    return ExitCode.SUCCESS


def convert_inline_hex(hex_color: str) -> ExitCode:
    """Print the Endless Sky values of a single HTML color."""
    try:
        fractions = hex_to_fractions(hex_color, options.strict)
    except ColorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.PARSE_ERROR
    if fractions:
        print(" ".join(format_fraction(v) for v in fractions))
    else:
        get_logger("command").warning("Invalid HTML color: %r", hex_color)
    return ExitCode.SUCCESS


def convert_inline_es(values: list[str]) -> ExitCode:
    """Print the HTML color of a single Endless Sky color."""
    try:
        channels = [float(v) for v in values[:_MAX_INLINE_VALUES]]
    except ValueError as e:
        get_logger("command").error("Invalid color value: %s", e)
        print(get_help())
        return ExitCode.PARSE_ERROR
    print(fractions_to_hex(channels))
    return ExitCode.SUCCESS


def dispatch(args: list[str]) -> ExitCode:
    """Run the command described by `args` (without the program name)."""
    args = list(args)
    debug_file = use_param(args, "--debug")
    if debug_file:
        init_logger(filename=debug_file, force_debug=True)
    else:
        init_logger()
    log = get_logger("command")
    options.strict = use_flag(args, "--strict")

    if not args:
        print(get_help())
        return ExitCode.USAGE_ERROR

    file_commands: dict[str, Callable[[list[DataNode]], list[str]]] = {
        "--es-to-hex": convert_es_nodes,
        "--hex-to-es": lambda nodes: convert_html_nodes(nodes, options.strict),
    }

    for i, arg in enumerate(args):
        if arg in {"-h", "--help"}:
            print(get_help())
            return ExitCode.SUCCESS
        if arg in file_commands:
            if i + 1 >= len(args):
                print("Error: expected additional argument:\n")
                print(get_help())
                return ExitCode.USAGE_ERROR
            return convert_file(args[i + 1], file_commands[arg])
        if arg.startswith(HEX_PREFIX):
            return convert_inline_hex(arg)

    if len(args) >= 3:
        return convert_inline_es(args)

    log.debug("No matching command for %s", args)
    print(get_help())
    return ExitCode.NO_MATCH


def main() -> None:
    """Run the command."""
    sys.exit(dispatch(sys.argv[1:]))


if __name__ == "__main__":
    main()
