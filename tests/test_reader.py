import io

import pytest

from brother_ql_raster.control.print_info import PrintJobInfo
from brother_ql_raster.instructions import (
    encode_extended_options,
    encode_init,
    encode_page_end,
    encode_page_start,
    encode_raster_end,
    encode_raster_line,
)
from brother_ql_raster.reader import BrotherQLReader, chunker


def sample_instructions() -> bytes:
    data = encode_init(flush=True)
    data += encode_page_start(PrintJobInfo(raster_number=2))
    data += encode_extended_options(cut_at_end=True, high_resolution=True)
    data += encode_raster_line(2, b"\x80\x00")
    data += encode_raster_line(2, b"\x00\x01")
    data += encode_raster_end(2)
    data += encode_page_end(last_page=True)
    return data


def test_chunker_splits_into_instructions() -> None:
    names = [opcode.name for opcode, _ in chunker(sample_instructions())]
    assert names.count("preamble") == 200
    assert names[200:] == ["init", "media/quality", "expanded", "raster", "raster", "raster end", "print"]


def test_chunker_skips_unknown_opcodes() -> None:
    names = [opcode.name for opcode, _ in chunker(b"\x99\x1B\x40")]
    assert names == ["init"]


def test_chunker_raises_on_unknown_opcode_when_asked() -> None:
    with pytest.raises(ValueError):
        list(chunker(b"\x99", raise_exception=True))


def test_analyse_collects_page() -> None:
    (page,) = BrotherQLReader(io.BytesIO(sample_instructions())).analyse()
    assert page.raster_number == 2
    assert page.rows == [b"\x80\x00", b"\x00\x01"]
    assert page.cut_at_end
    assert page.high_resolution
    assert page.last_page


def test_page_image_is_black_on_white_and_unmirrored() -> None:
    (page,) = BrotherQLReader(io.BytesIO(sample_instructions())).analyse()
    im = page.to_image()
    assert im.size == (16, 2)
    # first bit of the first row is the rightmost pixel on the label
    assert im.getpixel((15, 0)) == 0
    assert im.getpixel((0, 0)) == 255
    assert im.getpixel((0, 1)) == 0


def test_save_pages(tmp_path) -> None:
    reader = BrotherQLReader(io.BytesIO(sample_instructions()))
    reader.filename_fmt = str(tmp_path / "page{counter}.png")
    filenames = reader.save_pages(reader.analyse())
    assert filenames == [str(tmp_path / "page1.png")]
    assert (tmp_path / "page1.png").exists()


@pytest.mark.parametrize(
    "tail",
    [
        b"\x1b\x69\x4b",  # expanded mode without its option byte
        b"\x1b\x69\x7a\x00\x00\x00",  # page start cut short inside the print info
    ],
)
def test_analyse_skips_truncated_instruction(tail: bytes, caplog) -> None:
    assert BrotherQLReader(io.BytesIO(b"\x1b\x40" + tail)).analyse() == []
    assert "Skipping truncated" in caplog.text


def test_analyse_keeps_pages_before_truncated_tail() -> None:
    data = sample_instructions() + b"\x1b\x69\x7a\x86"
    (page,) = BrotherQLReader(io.BytesIO(data)).analyse()
    assert page.raster_number == 2
    assert page.last_page
