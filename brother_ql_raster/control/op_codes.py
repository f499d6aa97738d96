from dataclasses import dataclass


@dataclass(frozen=True)
class OpCode:
    signature: bytes
    name: str
    # -1: variable length, the length byte follows the signature.
    following_bytes: int
    description: str


OPCODES = [
    OpCode(b"\x00", "preamble", 0, "Preamble, 200x 0x00 to clear command buffer"),
    OpCode(b"\x67\x00", "raster", -1, "one raster line"),
    OpCode(b"\x67\xFF", "raster end", -1, "end of raster data, zero filled"),
    OpCode(b"\x0C", "print", 0, "print intermediate page"),
    OpCode(b"\x1A", "print", 0, "print final page"),
    OpCode(b"\x1b\x40", "init", 0, "initialization"),
    OpCode(b"\x1b\x69\x7A", "media/quality", 10, "print-media and print-quality"),
    OpCode(b"\x1b\x69\x4D", "various", 1, "Auto cut flag in bit 6"),
    OpCode(b"\x1b\x69\x41", "cut-every", 1, "cut every n-th page"),
    OpCode(b"\x1b\x69\x4B", "expanded", 1, "cut at end and high resolution"),
    OpCode(b"\x1b\x69\x64", "margins", 2, ""),
    OpCode(b"\x1b\x69\x53", "status request", 0, "A status information request sent to the printer"),
    OpCode(b"\x80\x20\x42", "status response", 29, "A status response received from the printer"),
]


def match_opcode(data: bytes) -> OpCode:
    matching_opcodes = [opcode for opcode in OPCODES if data.startswith(opcode.signature)]
    if len(matching_opcodes) != 1:
        raise ValueError("No unique opcode for data starting with {!r}".format(bytes(data[:4])))
    return matching_opcodes[0]


def instruction_length(opcode: OpCode, data: bytes) -> int:
    num_bytes = len(opcode.signature)
    if opcode.following_bytes >= 0:
        return num_bytes + opcode.following_bytes
    # raster frames: signature, length byte, payload
    return num_bytes + 1 + data[num_bytes]
