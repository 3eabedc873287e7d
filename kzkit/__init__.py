"""Practice-tool utilities: printf-style formatting, memory watches, scene tables, vector math, segment addressing and a number editor."""

__version__ = "0.1.0"
__all__ = [
    "numfmt",
    "printf",
    "watches",
    "scene_table",
    "scenes",
    "vec_math",
    "segments",
    "number_input",
]