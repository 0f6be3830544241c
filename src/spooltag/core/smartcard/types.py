from __future__ import annotations

from dataclasses import dataclass

SW_LENGTH = 2


@dataclass
class APDU:
    """Short-form command APDU (CLA INS P1 P2 [Lc Data] [Le])."""

    cla: int
    ins: int
    p1: int
    p2: int
    data: bytes = b""
    le: int | None = None

    def to_bytes(self) -> bytes:
        if len(self.data) > 255:
            raise ValueError(f"command data too long: {len(self.data)} bytes")
        buf = bytearray([self.cla, self.ins, self.p1, self.p2])
        if self.data:
            buf.append(len(self.data))
            buf.extend(self.data)
        if self.le is not None:
            buf.append(0x00 if self.le == 256 else self.le)
        return bytes(buf)

    def __repr__(self) -> str:
        return self.to_bytes().hex(" ").upper()


@dataclass
class Response:
    """Response APDU: payload followed by the two status word bytes."""

    data: bytes
    sw1: int
    sw2: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> Response:
        if len(raw) < SW_LENGTH:
            raise ValueError(f"response too short: {raw.hex().upper()}")
        return cls(data=bytes(raw[:-SW_LENGTH]), sw1=raw[-2], sw2=raw[-1])

    def to_bytes(self) -> bytes:
        return self.data + bytes([self.sw1, self.sw2])

    @property
    def sw(self) -> int:
        return (self.sw1 << 8) | self.sw2

    @property
    def length(self) -> int:
        """Length of the full response, status word included."""
        return len(self.data) + SW_LENGTH

    @property
    def success(self) -> bool:
        return self.sw1 == 0x90 and self.sw2 == 0x00

    def __repr__(self) -> str:
        sw = f"SW={self.sw:04X}"
        if self.data:
            return f"{self.data.hex(' ').upper()} {sw}"
        return sw
