"""Export: pick SVG or JSON, resolve frames, write to file(s) or stdout."""
from .dispatch import (
    EXPORT_FORMATS,
    FRAME_NAME_PLACEHOLDER,
    ConfigurationError,
    check_options,
    export_board,
    render_json,
    render_svg,
    write_output,
)

__all__ = [
    "EXPORT_FORMATS",
    "FRAME_NAME_PLACEHOLDER",
    "ConfigurationError",
    "check_options",
    "export_board",
    "render_json",
    "render_svg",
    "write_output",
]
