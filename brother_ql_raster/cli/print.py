import click
from PIL import Image

from .common import make_driver, open_backend
from ..control.outcome import PrintOutcome
from ..exceptions import BrotherQLInitError, BrotherQLPollTimeout
from ..pages import page_from_image


@click.command("print", short_help="Print a label")
@click.argument("images", nargs=-1, required=True, type=click.File("rb"), metavar="IMAGE [IMAGE] ...")
@click.option("-t", "--threshold", type=float, default=70.0, help="The threshold value (in percent) to discriminate between black and white pixels.")
@click.option(
    "--600dpi", "dpi_600", is_flag=True, help="Print with 300x600 dpi. Provide your image as 300 dpi across and 600 dpi along the label."
)
@click.option("--autocut-every", type=click.IntRange(1, 255), default=None, help="Enable the cutter and cut after every n-th label.")
@click.option("--margins", type=click.IntRange(0, 0xFFFF), default=None, help="Blank lines the printer feeds before and after the label on continuous tape.")
@click.pass_context
def print_cmd(ctx, *args, **kwargs):
    """Print a label of the provided IMAGE."""
    backend = open_backend(ctx)
    driver = make_driver(ctx, backend, autocut_interval=kwargs["autocut_every"], margins=kwargs["margins"])
    resolution = 2 * driver.model.resolution if kwargs["dpi_600"] else driver.model.resolution

    pages = (
        page_from_image(Image.open(image), driver.model, threshold=kwargs["threshold"], vertical_resolution=resolution)
        for image in kwargs["images"]
    )
    try:
        job = driver.print_job(pages)
    except (BrotherQLInitError, BrotherQLPollTimeout) as e:
        raise click.ClickException(str(e))
    finally:
        backend.dispose()

    if job.outcome == PrintOutcome.ERROR:
        raise click.ClickException("Printer reported: " + " ".join(job.errors))
