"""CHIP-8 instruction decoding."""

import enum

from chex import dataclass

from chip8vm.errors import InvalidOpcode


class Op(enum.Enum):
    """The 35 CHIP-8 operations."""
    SYS = "SYS"              # 0NNN
    CLS = "CLS"              # 00E0
    RET = "RET"              # 00EE
    JP = "JP"                # 1NNN
    CALL = "CALL"            # 2NNN
    SE_IMM = "SE_IMM"        # 3XNN
    SNE_IMM = "SNE_IMM"      # 4XNN
    SE_REG = "SE_REG"        # 5XY0
    LD_IMM = "LD_IMM"        # 6XNN
    ADD_IMM = "ADD_IMM"      # 7XNN
    LD_REG = "LD_REG"        # 8XY0
    OR = "OR"                # 8XY1
    AND = "AND"              # 8XY2
    XOR = "XOR"              # 8XY3
    ADD_REG = "ADD_REG"      # 8XY4
    SUB = "SUB"              # 8XY5
    SHR = "SHR"              # 8XY6
    SUBN = "SUBN"            # 8XY7
    SHL = "SHL"              # 8XYE
    SNE_REG = "SNE_REG"      # 9XY0
    LD_I = "LD_I"            # ANNN
    JP_V0 = "JP_V0"          # BNNN
    RND = "RND"              # CXNN
    DRW = "DRW"              # DXYN
    SKP = "SKP"              # EX9E
    SKNP = "SKNP"            # EXA1
    LD_VX_DT = "LD_VX_DT"    # FX07
    LD_VX_K = "LD_VX_K"      # FX0A
    LD_DT_VX = "LD_DT_VX"    # FX15
    LD_ST_VX = "LD_ST_VX"    # FX18
    ADD_I = "ADD_I"          # FX1E
    LD_F = "LD_F"            # FX29
    LD_B = "LD_B"            # FX33
    LD_MEM_VX = "LD_MEM_VX"  # FX55
    LD_VX_MEM = "LD_VX_MEM"  # FX65


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    op: Op
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


# Groups fully determined by the first nibble.
_BY_OPCODE = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_IMM,
    0x4: Op.SNE_IMM,
    0x6: Op.LD_IMM,
    0x7: Op.ADD_IMM,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW,
}

_ALU_BY_N = {
    0x0: Op.LD_REG,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_REG,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
}

_KEY_BY_NN = {
    0x9E: Op.SKP,
    0xA1: Op.SKNP,
}

_MISC_BY_NN = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_VX_K,
    0x15: Op.LD_DT_VX,
    0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I,
    0x29: Op.LD_F,
    0x33: Op.LD_B,
    0x55: Op.LD_MEM_VX,
    0x65: Op.LD_VX_MEM,
}


def classify(instruction: int) -> Op:
    """Map a 16-bit word to its operation, raising InvalidOpcode if there is none."""
    opcode = (instruction & 0xF000) >> 12
    n = instruction & 0x000F
    nn = instruction & 0x00FF

    if opcode in _BY_OPCODE:
        return _BY_OPCODE[opcode]
    if opcode == 0x0:
        if instruction == 0x00E0:
            return Op.CLS
        if instruction == 0x00EE:
            return Op.RET
        return Op.SYS
    if opcode == 0x5 and n == 0:
        return Op.SE_REG
    if opcode == 0x9 and n == 0:
        return Op.SNE_REG
    if opcode == 0x8 and n in _ALU_BY_N:
        return _ALU_BY_N[n]
    if opcode == 0xE and nn in _KEY_BY_NN:
        return _KEY_BY_NN[nn]
    if opcode == 0xF and nn in _MISC_BY_NN:
        return _MISC_BY_NN[nn]
    raise InvalidOpcode(instruction)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=instruction,
        op=classify(instruction),
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )


_MNEMONICS = {
    Op.SYS: "SYS  {nnn:03X}",
    Op.CLS: "CLS",
    Op.RET: "RET",
    Op.JP: "JP   {nnn:03X}",
    Op.CALL: "CALL {nnn:03X}",
    Op.SE_IMM: "SE   V{x:X}, {nn:02X}",
    Op.SNE_IMM: "SNE  V{x:X}, {nn:02X}",
    Op.SE_REG: "SE   V{x:X}, V{y:X}",
    Op.LD_IMM: "LD   V{x:X}, {nn:02X}",
    Op.ADD_IMM: "ADD  V{x:X}, {nn:02X}",
    Op.LD_REG: "LD   V{x:X}, V{y:X}",
    Op.OR: "OR   V{x:X}, V{y:X}",
    Op.AND: "AND  V{x:X}, V{y:X}",
    Op.XOR: "XOR  V{x:X}, V{y:X}",
    Op.ADD_REG: "ADD  V{x:X}, V{y:X}",
    Op.SUB: "SUB  V{x:X}, V{y:X}",
    Op.SHR: "SHR  V{x:X}, V{y:X}",
    Op.SUBN: "SUBN V{x:X}, V{y:X}",
    Op.SHL: "SHL  V{x:X}, V{y:X}",
    Op.SNE_REG: "SNE  V{x:X}, V{y:X}",
    Op.LD_I: "LD   I, {nnn:03X}",
    Op.JP_V0: "JP   V0, {nnn:03X}",
    Op.RND: "RND  V{x:X}, {nn:02X}",
    Op.DRW: "DRW  V{x:X}, V{y:X}, {n:X}",
    Op.SKP: "SKP  V{x:X}",
    Op.SKNP: "SKNP V{x:X}",
    Op.LD_VX_DT: "LD   V{x:X}, DT",
    Op.LD_VX_K: "LD   V{x:X}, K",
    Op.LD_DT_VX: "LD   DT, V{x:X}",
    Op.LD_ST_VX: "LD   ST, V{x:X}",
    Op.ADD_I: "ADD  I, V{x:X}",
    Op.LD_F: "LD   F, V{x:X}",
    Op.LD_B: "LD   B, V{x:X}",
    Op.LD_MEM_VX: "LD   [I], V{x:X}",
    Op.LD_VX_MEM: "LD   V{x:X}, [I]",
}


def disassemble(instruction: int) -> str:
    """Render an instruction word as an assembler mnemonic."""
    decoded = decode(instruction)
    return _MNEMONICS[decoded.op].format(
        x=decoded.x, y=decoded.y, n=decoded.n, nn=decoded.nn, nnn=decoded.nnn
    )
