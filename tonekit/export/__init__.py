# Token export: CSS custom properties and JSON

from .tokens import EXPORT_FORMATS, to_css, to_json, token_map, token_name, write_tokens

__all__ = ["EXPORT_FORMATS", "to_css", "to_json", "token_map", "token_name", "write_tokens"]
