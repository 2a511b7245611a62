from __future__ import annotations

import re

_HEX_COLOR_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")


def normalize_color(value: str | int) -> str:
    """Normalize a color into ``#RRGGBB`` form.

    Args:
        value: ``RRGGBB`` / ``#RRGGBB`` text or an integer ``0xRRGGBB``.

    Returns:
        Uppercase HEX string with '#'.

    Raises:
        ValueError: If the value is not a valid RGB color.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Color out of range: {value:#x}")
        return f"#{value:06X}"
    text = value.strip().upper()
    if not _HEX_COLOR_PATTERN.match(text):
        raise ValueError("Invalid color format. Use 'RRGGBB', '#RRGGBB', or 0xRRGGBB.")
    return text if text.startswith("#") else f"#{text}"


__all__ = ["normalize_color"]
