from .transform_char import transform_char, normalize_text
from .text_io        import TextIOError, read_input, write_output

__all__ = ["transform_char", "normalize_text",
           "TextIOError", "read_input", "write_output"]
