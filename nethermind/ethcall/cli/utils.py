import logging
import os
from logging import Logger

import click
from rich.console import Console
from rich.logging import RichHandler

from nethermind.ethcall.rpc import DEFAULT_RPC

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("cli")


def cli_logger_config(instrument_logger: Logger, verbose: bool = False) -> Console:
    """Routes log records through a rich console, and returns the console for CLI output"""
    rich_console = Console()
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=rich_console))
    instrument_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return rich_console


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


# -------------------------------------------------------
#    Connections & Configurations
# -------------------------------------------------------
json_rpc_option = click.option(
    "--json-rpc",
    "-rpc",
    "json_rpc",
    default=os.environ.get("JSON_RPC", DEFAULT_RPC),
    show_default=True,
    help="RPC url to send eth_call requests to.  If not provided, will use the JSON_RPC environment variable",
)
block_option = click.option(
    "--block",
    "block",
    default=os.environ.get("ETHCALL_BLOCK", "latest"),
    show_default=True,
    help="Block tag or hex block number to execute the call against",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enables debug logging",
)

# -------------------------------------------------------
#    Call Parameters
# -------------------------------------------------------
to_address_option = click.option(
    "--to",
    "-to",
    "to_address",
    type=str,
    required=True,
    help="Contract address to call",
)
returns_option = click.option(
    "--returns",
    "-r",
    "return_types",
    type=str,
    default="()",
    show_default=True,
    help="Return type tuple of the function, ie '(uint256,address)'",
)
signature_argument = click.argument("signature")
call_args_argument = click.argument("call_args", nargs=-1, type=click.UNPROCESSED)
