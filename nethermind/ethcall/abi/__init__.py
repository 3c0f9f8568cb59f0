from .decoder import decode_return_data, decode_return_hex
from .encoder import TraceHook, convert_argument, encode_arguments, encode_call
from .formatter import format_return_values, format_value, rendered_pairs
from .selector import function_selector, selector_hex
from .signature import parse_return_types, parse_signature, parse_type

__all__ = [
    "TraceHook",
    "convert_argument",
    "decode_return_data",
    "decode_return_hex",
    "encode_arguments",
    "encode_call",
    "format_return_values",
    "format_value",
    "function_selector",
    "parse_return_types",
    "parse_signature",
    "parse_type",
    "rendered_pairs",
    "selector_hex",
]
