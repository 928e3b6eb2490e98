from .css import ParsedColor, parse_color_text

__all__ = ['ParsedColor', 'parse_color_text']
