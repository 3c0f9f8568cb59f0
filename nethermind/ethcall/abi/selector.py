import logging

from eth_utils import keccak

from nethermind.ethcall.types import FunctionSignature

from .signature import parse_signature

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("abi")


def function_selector(signature: FunctionSignature | str) -> bytes:
    """
    Computes the 4 byte function selector.  String signatures are parsed & normalized first, so whitespace
    in the input does not change the selector.

    >>> function_selector("getTransaction(uint256)").hex()
    '4f0f4aa9'

    :param signature: FunctionSignature or signature string
    :return: first 4 bytes of the keccak256 hash of the canonical signature
    """
    if isinstance(signature, str):
        signature = parse_signature(signature)

    selector = keccak(text=signature.canonical)[:4]
    logger.debug(f"Selector for {signature.canonical}: 0x{selector.hex()}")
    return selector


def selector_hex(signature: FunctionSignature | str) -> str:
    """Returns the function selector as lowercase hex without 0x prefix"""
    return function_selector(signature).hex()
