import json
import logging
from typing import Any

import click
from rich.console import Console

from nethermind.ethcall.abi import (
    decode_return_hex,
    encode_call,
    format_return_values,
    parse_return_types,
    parse_signature,
    rendered_pairs,
    selector_hex,
)
from nethermind.ethcall.exceptions import EthCallError
from nethermind.ethcall.rpc import DEFAULT_RPC, curl_command, eth_call_request, post_json_rpc
from nethermind.ethcall.types import EncodedCall, ReturnSchema

from .utils import (
    block_option,
    call_args_argument,
    cli_logger_config,
    group_options,
    json_rpc_option,
    returns_option,
    signature_argument,
    to_address_option,
    verbose_option,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("cli")

# pylint: disable=too-many-arguments,raise-missing-from

ARGS_CONTEXT = {"ignore_unknown_options": True}
""" Allows negative integer arguments like -5 to be passed without being parsed as options """


def _log_trace(event: str, details: dict[str, Any]):
    if event == "selector":
        logger.info(f"Method ID: {details['selector']}")
    else:
        logger.debug(f"{event}: {details}")


def _execute_call(
    console: Console,
    json_rpc: str,
    to_address: str,
    encoded: EncodedCall,
    schema: ReturnSchema,
    block: str,
):
    request = eth_call_request(to_address, encoded.call_data_hex, block)
    response = post_json_rpc(json_rpc, request)

    console.print("\nRaw Response:")
    click.echo(json.dumps(response))

    result = response.get("result")
    if result:
        console.print("\nDecoded Result:")
        for line in format_return_values(decode_return_hex(result, schema)):
            click.echo(line)


@click.group()
def ethcall_cli():
    """Encode, send, and decode read-only contract calls"""


@ethcall_cli.command()
@signature_argument
def selector(signature: str):
    """Prints the 4 byte selector for a function signature"""
    cli_logger_config(root_logger)

    try:
        click.echo(selector_hex(signature))
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)


@ethcall_cli.command(context_settings=ARGS_CONTEXT)
@group_options(verbose_option)
@signature_argument
@call_args_argument
def encode(signature: str, call_args: tuple[str, ...], verbose: bool):
    """Encodes call data for SIGNATURE with one CALL_ARGS value per parameter"""
    cli_logger_config(root_logger, verbose)

    try:
        encoded = encode_call(signature, list(call_args), trace=_log_trace)
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)

    click.echo(f"Selector: {encoded.selector_hex}")
    click.echo(f"Encoded data: {encoded.call_data_hex}")


@ethcall_cli.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Output decoded values as JSON")
@click.argument("return_types")
@click.argument("raw_hex")
def decode(return_types: str, raw_hex: str, as_json: bool):
    """Decodes RAW_HEX return data using the RETURN_TYPES tuple, ie '(uint256,address)'"""
    cli_logger_config(root_logger)

    try:
        values = decode_return_hex(raw_hex, return_types)
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(rendered_pairs(values)))
        return

    for line in format_return_values(values):
        click.echo(line)


@ethcall_cli.command(context_settings=ARGS_CONTEXT)
@group_options(to_address_option, json_rpc_option, block_option, verbose_option)
@signature_argument
@call_args_argument
def request(signature: str, call_args: tuple[str, ...], to_address: str, json_rpc: str, block: str, verbose: bool):
    """Prints the eth_call JSON-RPC request and matching curl command without sending it"""
    cli_logger_config(root_logger, verbose)

    try:
        encoded = encode_call(signature, list(call_args), trace=_log_trace)
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)

    rpc_request = eth_call_request(to_address, encoded.call_data_hex, block)
    click.echo(json.dumps(rpc_request))
    click.echo(curl_command(json_rpc, rpc_request))


@ethcall_cli.command(context_settings=ARGS_CONTEXT)
@group_options(to_address_option, returns_option, json_rpc_option, block_option, verbose_option)
@signature_argument
@call_args_argument
def call(
    signature: str,
    call_args: tuple[str, ...],
    to_address: str,
    return_types: str,
    json_rpc: str,
    block: str,
    verbose: bool,
):
    """Encodes SIGNATURE with CALL_ARGS, executes eth_call, and decodes the result"""
    console = cli_logger_config(root_logger, verbose)

    try:
        schema = parse_return_types(return_types)
        encoded = encode_call(signature, list(call_args), trace=_log_trace)
        click.echo(f"Encoded data: {encoded.call_data_hex}")
        _execute_call(console, json_rpc, to_address, encoded, schema, block)
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)


@ethcall_cli.command()
@group_options(block_option, verbose_option)
def interactive(block: str, verbose: bool):
    """Prompts for a contract call, shows the curl command, and optionally executes it"""
    console = cli_logger_config(root_logger, verbose)

    try:
        to_address = click.prompt("Enter contract address")
        signature = parse_signature(click.prompt("Enter function signature (e.g., getBalance(address))"))
        schema = parse_return_types(click.prompt("Enter return type (e.g., (uint256,address))", default="()"))

        call_args = [
            click.prompt(f"Enter value for parameter {index + 1} ({param.canonical})")
            for index, param in enumerate(signature.parameters)
        ]
        json_rpc = click.prompt("Enter Ethereum RPC URL", default=DEFAULT_RPC)

        encoded = encode_call(signature, call_args, trace=_log_trace)
        click.echo(f"Encoded data: {encoded.call_data_hex}")

        rpc_request = eth_call_request(to_address, encoded.call_data_hex, block)
        console.print("\nGenerated curl command:")
        click.echo(curl_command(json_rpc, rpc_request))

        if click.confirm("\nDo you want to execute this command?", default=False):
            _execute_call(console, json_rpc, to_address, encoded, schema, block)
    except EthCallError as e:
        logger.error(e)
        raise SystemExit(1)
