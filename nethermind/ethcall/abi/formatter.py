from typing import Any

from eth_utils import to_checksum_address

from nethermind.ethcall.types import (
    AddressType,
    BoolType,
    BytesType,
    DecodedValue,
    IntegerType,
    StringType,
)


def format_value(decoded: DecodedValue) -> str:
    """
    Renders a decoded value for display.

    * address -> checksummed hex with 0x prefix
    * bytes & bytesN -> hex without 0x prefix
    * string -> raw text
    * integers -> base 10
    * bool -> ``true`` or ``false``
    """
    match decoded.type:
        case AddressType():
            return to_checksum_address(decoded.value)
        case BytesType():
            return bytes(decoded.value).hex()
        case StringType():
            return decoded.value
        case IntegerType():
            return str(int(decoded.value))
        case BoolType():
            return "true" if decoded.value else "false"
        case _:
            return str(decoded.value)


def format_return_values(values: list[DecodedValue]) -> list[str]:
    """Formats decoded values as ``<type>: <value>`` display strings"""
    return [f"{value.type.canonical}: {format_value(value)}" for value in values]


def rendered_pairs(values: list[DecodedValue]) -> list[dict[str, Any]]:
    """Returns ``{"type": ..., "value": ...}`` dicts for each decoded value, for JSON output"""
    return [{"type": value.type.canonical, "value": format_value(value)} for value in values]
