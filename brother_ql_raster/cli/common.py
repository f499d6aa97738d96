import click

from ..backends import Backend
from ..backends.abstract import BaseBrotherQLBackend
from ..driver import BrotherQLDriver
from ..models import Models
from ..settings import DriverSettings


def open_backend(ctx: click.Context) -> BaseBrotherQLBackend:
    printer_identifier = ctx.meta.get("PRINTER")
    if not printer_identifier:
        raise click.UsageError("No printer given, use --printer or BROTHER_QL_PRINTER.")
    if ctx.meta.get("BACKEND"):
        backend = Backend(ctx.meta["BACKEND"])
    else:
        try:
            backend = Backend.detect(printer_identifier)
        except ValueError as e:
            raise click.UsageError(str(e))
    return backend.printer(printer_identifier, read_timeout=ctx.meta.get("READ_TIMEOUT"))


def _meta(ctx: click.Context, key: str, default):
    value = ctx.meta.get(key)
    return default if value is None else value


def make_driver(ctx: click.Context, backend: BaseBrotherQLBackend, **settings) -> BrotherQLDriver:
    settings = DriverSettings(
        poll_attempts=_meta(ctx, "POLL_ATTEMPTS", 25),
        poll_interval=_meta(ctx, "POLL_INTERVAL", 0.1),
        read_timeout=_meta(ctx, "READ_TIMEOUT", 10.0),
        **settings,
    )
    return BrotherQLDriver(backend, Models.from_identifier(ctx.meta.get("MODEL") or "QL-570"), settings)
