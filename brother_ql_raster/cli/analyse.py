import click

from ..reader import BrotherQLReader


@click.command(name="analyze", help="interpret a binary file containing raster instructions for the Brother QL-Series printers")
@click.argument("instructions", type=click.File("rb"))
@click.option("-f", "--filename-format", help="Filename format string. Default is: label{counter:04d}.png.")
@click.pass_context
def analyze_cmd(ctx, *args, **kwargs):
    br = BrotherQLReader(kwargs.get("instructions"))
    if kwargs.get("filename_format"):
        br.filename_fmt = kwargs.get("filename_format")
    pages = br.analyse()
    for filename in br.save_pages(pages):
        click.echo("Page saved as {}".format(filename))
