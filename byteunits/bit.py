#
# ByteUnits Bit Units
#

# Bit levels are scaled in bits; to_bytes derives each level's byte ratio directly as
# scale / 8, so BITS divides by 8 and KILOBITS multiplies by 125.

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .units import ScaledUnit, unit_family

BITS_PER_BYTE = 8


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unit_family(
    unit_name="bits", labels=("b", "Kb", "Mb", "Gb", "Tb", "Pb"), step=1000, units_per_byte=BITS_PER_BYTE,
)
@unique
class BitUnit(ScaledUnit, Enum):
    """
    Power-of-ten bit sizes at a given unit of granularity.

    Attributes:
        BITS (int)     : 1 bit
        KILOBITS (int) : 1000 bits
        MEGABITS (int) : 1000 kilobits
        GIGABITS (int) : 1000 megabits
        TERABITS (int) : 1000 gigabits
        PETABITS (int) : 1000 terabits

    Examples:
        >>> BitUnit.BITS.to_bytes(999)
        124
        >>> BitUnit.MEGABITS.to_bytes(3)
        375000
        >>> BitUnit.format(1200000000)
        '1.2 Gb'
    """
    BITS = 0
    KILOBITS = 1
    MEGABITS = 2
    GIGABITS = 3
    TERABITS = 4
    PETABITS = 5
# @formatter:on

    def to_bits(self, count: int) -> int:
        """Equivalent to BITS.convert(count, self)."""
        return BitUnit.BITS.convert(count, self)

    def to_kilobits(self, count: int) -> int:
        """Equivalent to KILOBITS.convert(count, self)."""
        return BitUnit.KILOBITS.convert(count, self)

    def to_megabits(self, count: int) -> int:
        """Equivalent to MEGABITS.convert(count, self)."""
        return BitUnit.MEGABITS.convert(count, self)

    def to_gigabits(self, count: int) -> int:
        """Equivalent to GIGABITS.convert(count, self)."""
        return BitUnit.GIGABITS.convert(count, self)

    def to_terabits(self, count: int) -> int:
        """Equivalent to TERABITS.convert(count, self)."""
        return BitUnit.TERABITS.convert(count, self)

    def to_petabits(self, count: int) -> int:
        """Equivalent to PETABITS.convert(count, self)."""
        return BitUnit.PETABITS.convert(count, self)
