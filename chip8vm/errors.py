"""CHIP-8 interpreter errors."""


class Chip8Error(Exception):
    """Base class for all interpreter errors."""


class RomTooLarge(Chip8Error):
    """ROM does not fit between 0x200 and the end of memory."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"ROM is {size} bytes, capacity is {capacity} bytes")


class FatalError(Chip8Error):
    """Condition that halts the interpreter for good."""


class OutOfBounds(FatalError):
    """Memory access outside the addressable or writable range."""

    def __init__(self, address: int, message: str = "memory access out of bounds"):
        self.address = address
        super().__init__(f"{message}: 0x{address:04X}")


class InvalidOpcode(FatalError):
    """Instruction word that does not decode to any CHIP-8 operation."""

    def __init__(self, word: int):
        self.word = word
        super().__init__(f"invalid opcode 0x{word:04X}")


class StackOverflow(FatalError):
    """CALL with a full call stack."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"stack overflow calling 0x{address:03X}")


class StackUnderflow(FatalError):
    """RET with an empty call stack."""

    def __init__(self):
        super().__init__("stack underflow on return")
