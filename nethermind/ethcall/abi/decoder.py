import logging
import re
from typing import Any, Callable, Sequence

from eth_abi import decode as eth_abi_decode
from eth_abi.exceptions import DecodingError, InsufficientDataBytes, InvalidPointer
from eth_utils import to_checksum_address

from nethermind.ethcall.exceptions import (
    InvalidReturnValue,
    MalformedReturnData,
    TruncatedReturnData,
)
from nethermind.ethcall.types import DecodedValue, ReturnSchema

from .signature import parse_return_types
from .utils import SLOT_SIZE, strip_0x_prefix

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("abi")

_HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{2})*$")

formatters: dict[str, Callable[[Any], Any]] = {"address": to_checksum_address}
""" Applied to decoded values by canonical type.  Addresses are returned as checksummed hexstrings """

# pylint: disable=raise-missing-from


def decode_return_data(data: bytes, schema: ReturnSchema) -> list[DecodedValue]:
    """
    Decodes ABI encoded return data.  Static values are read from their head slot, and dynamic values are read
    from the tail position referenced by the offset in their head slot.

    :param data: raw return bytes
    :param schema: parsed return types
    :return: one DecodedValue per return type, in order
    :raises TruncatedReturnData: if data is too short for a head slot or a referenced tail region
    :raises InvalidReturnValue: if a slot holds a value outside of its type, ie a uint8 slot holding 300
    """
    head_size = SLOT_SIZE * len(schema)
    if len(data) < head_size:
        raise TruncatedReturnData(actual=len(data), expected=head_size, offset=0)

    abi_types = [type_descriptor.canonical for type_descriptor in schema]
    try:
        decoded = eth_abi_decode(abi_types, data)
    except (InsufficientDataBytes, InvalidPointer) as e:
        raise TruncatedReturnData(actual=len(data), detail=str(e))
    except (DecodingError, UnicodeDecodeError) as e:
        raise InvalidReturnValue(f"({','.join(abi_types)})", str(e))

    values = []
    for type_descriptor, value in zip(schema, decoded, strict=True):
        formatter = formatters.get(type_descriptor.canonical)
        values.append(DecodedValue(type=type_descriptor, value=formatter(value) if formatter else value))

    logger.debug(f"Decoded {len(values)} values from {len(data)} bytes of return data")
    return values


def decode_return_hex(raw_hex: str, return_types: str | Sequence[str] | ReturnSchema) -> list[DecodedValue]:
    """
    Decodes a hex encoded ``eth_call`` result.  Return types are parsed before any data is read.

    >>> [v.value for v in decode_return_hex("0x" + "00" * 31 + "07", "(uint256)")]
    [7]

    :param raw_hex: return data as hex, with or without 0x prefix
    :param return_types: return type tuple string like ``(uint256,address)``, list of type strings, or a ReturnSchema
    """
    if isinstance(return_types, str) or any(isinstance(token, str) for token in return_types):
        schema = parse_return_types(return_types)  # type: ignore[arg-type]
    else:
        schema = tuple(return_types)

    hex_str = strip_0x_prefix(raw_hex.strip())
    if not _HEX_PATTERN.match(hex_str):
        raise MalformedReturnData(raw_hex)

    return decode_return_data(bytes.fromhex(hex_str), schema)
