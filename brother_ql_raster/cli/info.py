import click

from ..models import Models
from ..utils.output_helpers import textual_model_description


@click.group()
@click.pass_context
def info(ctx, *args, **kwargs):
    """List available models etc."""


@info.command(name="models")
@click.pass_context
def models_cmd(ctx, *args, **kwargs):
    """List the choices for --model"""
    click.echo(textual_model_description([model.value for model in Models]), nl=False)
