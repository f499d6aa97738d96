def hex_format(data: bytes) -> str:
    return " ".join("{:02X}".format(byte) for byte in bytes(data))
