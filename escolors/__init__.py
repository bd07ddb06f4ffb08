"""escolors - convert between Endless Sky fractional colors and HTML hex codes.

Reads Endless Sky data files (``color <name> <r> <g> <b> [<a>]``) or HTML style
color lists (``color <name> #rrggbb``) and prints the other representation.
Single values can also be converted straight from the command line.
"""
