#
# ByteUnits Decimal Byte Units
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .units import ScaledUnit, unit_family


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unit_family(unit_name="bytes", labels=("B", "KB", "MB", "GB", "TB", "PB"), step=1000)
@unique
class DecimalByteUnit(ScaledUnit, Enum):
    """
    Power-of-ten byte sizes at a given unit of granularity.

    A DecimalByteUnit does not hold a size, it only converts sizes kept elsewhere
    between units. Conversions to coarser units truncate; conversions to finer units
    saturate to MIN_INT64/MAX_INT64 instead of overflowing.

    Attributes:
        BYTES (int)     : 1 byte
        KILOBYTES (int) : 1000 bytes
        MEGABYTES (int) : 1000 kilobytes
        GIGABYTES (int) : 1000 megabytes
        TERABYTES (int) : 1000 gigabytes
        PETABYTES (int) : 1000 terabytes

    Examples:
        >>> DecimalByteUnit.BYTES.convert(10, DecimalByteUnit.KILOBYTES)
        10000
        >>> DecimalByteUnit.KILOBYTES.to_megabytes(999)
        0
        >>> DecimalByteUnit.format(1200000000)
        '1.2 GB'
    """
    BYTES = 0
    KILOBYTES = 1
    MEGABYTES = 2
    GIGABYTES = 3
    TERABYTES = 4
    PETABYTES = 5
# @formatter:on

    def to_kilobytes(self, count: int) -> int:
        """Equivalent to KILOBYTES.convert(count, self)."""
        return DecimalByteUnit.KILOBYTES.convert(count, self)

    def to_megabytes(self, count: int) -> int:
        """Equivalent to MEGABYTES.convert(count, self)."""
        return DecimalByteUnit.MEGABYTES.convert(count, self)

    def to_gigabytes(self, count: int) -> int:
        """Equivalent to GIGABYTES.convert(count, self)."""
        return DecimalByteUnit.GIGABYTES.convert(count, self)

    def to_terabytes(self, count: int) -> int:
        """Equivalent to TERABYTES.convert(count, self)."""
        return DecimalByteUnit.TERABYTES.convert(count, self)

    def to_petabytes(self, count: int) -> int:
        """Equivalent to PETABYTES.convert(count, self)."""
        return DecimalByteUnit.PETABYTES.convert(count, self)
