from typing import List, Sequence

from .commands import LineCommand, PathCommand, ensure_endpoint_form


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate, integral values without '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _join(*values) -> str:
    return ",".join(format_number(v) for v in values)


def commands_to_path(commands: Sequence[PathCommand]) -> str:
    """
    Assemble the commands of one loop into a closed path string.

    The first command supplies the move-to point; every command, the first
    included, then draws to its end point. The path ends with a close.

    Raises:
        ValueError: if there are no commands
    """
    if not commands:
        raise ValueError("Cannot build a path from an empty command list")

    resolved = [ensure_endpoint_form(command) for command in commands]
    parts: List[str] = ["M" + _join(resolved[0].x0, resolved[0].y0) + ","]
    for command in resolved:
        if isinstance(command, LineCommand):
            parts.append("L" + _join(command.x, command.y) + ",")
        else:
            parts.append(
                "A"
                + _join(
                    command.rx,
                    command.ry,
                    command.x_axis_rotation,
                    command.large_arc,
                    command.sweep,
                    command.x,
                    command.y,
                )
                + ","
            )
    parts.append("Z")
    return "".join(parts)
