import click

from .common import make_driver, open_backend
from ..exceptions import BrotherQLInitError
from ..utils.output_helpers import textual_status_description


@click.command(name="status", short_help="initialize the printer and show its status")
@click.pass_context
def status_cmd(ctx):
    backend = open_backend(ctx)
    driver = make_driver(ctx, backend)
    try:
        status = driver.initialize()
    except BrotherQLInitError as e:
        raise click.ClickException(str(e))
    finally:
        backend.dispose()
    # with --printer - stdout carries the printer's commands
    click.echo(textual_status_description(status), err=ctx.meta.get("PRINTER") == "-")
