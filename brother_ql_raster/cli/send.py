import click

from .common import make_driver, open_backend
from ..control.outcome import PrintOutcome


@click.command(name="send", short_help="send an instruction file to the printer")
@click.argument("instructions", type=click.File("rb"))
@click.option("--no-wait", is_flag=True, help="Don't wait for the printer to report the end of the page.")
@click.pass_context
def send_cmd(ctx, *args, **kwargs):
    backend = open_backend(ctx)
    driver = make_driver(ctx, backend)
    try:
        status = driver.send(instructions=kwargs["instructions"].read(), blocking=not kwargs["no_wait"])
    finally:
        backend.dispose()
    if status.outcome == PrintOutcome.ERROR:
        raise click.ClickException("Printer reported: " + " ".join(status.errors))
