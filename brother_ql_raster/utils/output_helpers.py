from ..control.response import PrinterStatus
from ..models import Model


def _name(value) -> str:
    return value.name if hasattr(value, "name") else "unknown (0x{:02X})".format(value)


def textual_status_description(status: PrinterStatus) -> str:
    output = "Printer status:\n"
    fmt = " {key:18s} {value}\n"
    output += fmt.format(key="Printer", value=_name(status.printer_type))
    output += fmt.format(key="Media type", value=_name(status.media))
    output += fmt.format(key="Media width", value="{} mm".format(status.media_width))
    output += fmt.format(key="Media length", value="{} mm".format(status.media_length) if status.media_length else "endless")
    output += fmt.format(key="Status type", value=_name(status.status))
    output += fmt.format(key="Phase", value=_name(status.phase))
    errors = [error.description for error in status.errors_1 + status.errors_2]
    output += fmt.format(key="Errors", value=" ".join(errors) if errors else "none")
    return output


def textual_model_description(models: list[Model]) -> str:
    output = "Supported models:\n"
    fmt = " {identifier:9s} {bytes_per_row:>13s} {min_lines:>9s} {high_res:>8s}\n"
    output += fmt.format(identifier="Name", bytes_per_row="Bytes per row", min_lines="Min lines", high_res="600 dpi")
    for model in models:
        output += fmt.format(
            identifier=model.identifier,
            bytes_per_row=str(model.buffer_width),
            min_lines=str(model.min_lines),
            high_res="yes" if model.supports_high_res else "no",
        )
    return output
