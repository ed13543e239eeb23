#
# ByteUnits Binary Byte Units
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .units import ScaledUnit, unit_family


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unit_family(unit_name="bytes", labels=("B", "KiB", "MiB", "GiB", "TiB", "PiB"), step=1024)
@unique
class BinaryByteUnit(ScaledUnit, Enum):
    """
    Power-of-two (IEC) byte sizes at a given unit of granularity.

    Attributes:
        BYTES (int)     : 1 byte
        KIBIBYTES (int) : 1024 bytes
        MEBIBYTES (int) : 1024 kibibytes
        GIBIBYTES (int) : 1024 mebibytes
        TEBIBYTES (int) : 1024 gibibytes
        PEBIBYTES (int) : 1024 tebibytes

    Examples:
        >>> BinaryByteUnit.KIBIBYTES.to_bytes(16)
        16384
        >>> BinaryByteUnit.format(1234567)
        '1.2 MiB'
        >>> BinaryByteUnit.format(1234567, "0.0#")
        '1.18 MiB'
    """
    BYTES = 0
    KIBIBYTES = 1
    MEBIBYTES = 2
    GIBIBYTES = 3
    TEBIBYTES = 4
    PEBIBYTES = 5
# @formatter:on

    def to_kibibytes(self, count: int) -> int:
        """Equivalent to KIBIBYTES.convert(count, self)."""
        return BinaryByteUnit.KIBIBYTES.convert(count, self)

    def to_mebibytes(self, count: int) -> int:
        """Equivalent to MEBIBYTES.convert(count, self)."""
        return BinaryByteUnit.MEBIBYTES.convert(count, self)

    def to_gibibytes(self, count: int) -> int:
        """Equivalent to GIBIBYTES.convert(count, self)."""
        return BinaryByteUnit.GIBIBYTES.convert(count, self)

    def to_tebibytes(self, count: int) -> int:
        """Equivalent to TEBIBYTES.convert(count, self)."""
        return BinaryByteUnit.TEBIBYTES.convert(count, self)

    def to_pebibytes(self, count: int) -> int:
        """Equivalent to PEBIBYTES.convert(count, self)."""
        return BinaryByteUnit.PEBIBYTES.convert(count, self)
