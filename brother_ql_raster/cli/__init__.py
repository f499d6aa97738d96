import logging

import click

from .analyse import analyze_cmd
from .info import info
from .print import print_cmd
from .send import send_cmd
from .status import status_cmd
from ..backends import Backend
from ..models import Models

logger = logging.getLogger("brother_ql_raster")


printer_help = "The identifier for the printer. This could be a string like file:///dev/usb/lp0 for the kernel's USB printer device, usb://0x04f9:0x2028 for a printer accessed via PyUSB, or - to write to stdout."


@click.group()
@click.option("-b", "--backend", type=click.Choice(Backend.all()), envvar="BROTHER_QL_BACKEND")
@click.option("-m", "--model", type=click.Choice(Models.identifiers()), default="QL-570", envvar="BROTHER_QL_MODEL")
@click.option("-p", "--printer", metavar="PRINTER_IDENTIFIER", envvar="BROTHER_QL_PRINTER", help=printer_help)
@click.option("--poll-attempts", type=click.IntRange(min=1), default=25, envvar="BROTHER_QL_POLL_ATTEMPTS", help="Status reads while waiting for a page to finish.")
@click.option("--poll-interval", type=click.FloatRange(min=0), default=0.1, envvar="BROTHER_QL_POLL_INTERVAL", help="Seconds between two status reads.")
@click.option("--read-timeout", type=click.FloatRange(min=0), default=10.0, envvar="BROTHER_QL_READ_TIMEOUT", help="Seconds a single status read may block.")
@click.option("--debug", is_flag=True)
@click.version_option(package_name="brother-ql-raster")
@click.pass_context
def cli(ctx, *args, **kwargs):
    """Command line interface for the brother_ql_raster Python package."""

    # Store the general CLI options in the context meta dictionary.
    # The name corresponds to the second half of the respective envvar:
    ctx.meta["MODEL"] = kwargs.get("model")
    ctx.meta["BACKEND"] = kwargs.get("backend")
    ctx.meta["PRINTER"] = kwargs.get("printer")
    ctx.meta["POLL_ATTEMPTS"] = kwargs.get("poll_attempts")
    ctx.meta["POLL_INTERVAL"] = kwargs.get("poll_interval")
    ctx.meta["READ_TIMEOUT"] = kwargs.get("read_timeout")

    logging.basicConfig(level="DEBUG" if kwargs.get("debug") else "INFO")


cli.add_command(info)
cli.add_command(print_cmd)
cli.add_command(analyze_cmd)
cli.add_command(send_cmd)
cli.add_command(status_cmd)

if __name__ == "__main__":
    cli()
