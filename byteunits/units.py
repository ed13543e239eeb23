#
# ByteUnits Shared Unit Family Machinery
#

# Every unit family is a closed Enum whose member values are ordinals 0..N-1, finest first.
# The ordinal indexes immutable per-family tables: exact integer scales, labels and a
# precomputed (source, target) -> ConversionStep table. Dispatch is a table lookup.

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Callable, Protocol, Self, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import NumberFormatter, fmt_value, resolve_formatter
from .numeric import MAX_INT64, saturated_multiply, std_int64, truncated_divide


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class ByteUnit(Protocol):
    """
    A unit of granularity whose sizes can be converted into bytes.

    Implemented by DecimalByteUnit, BinaryByteUnit and BitUnit. Conversions with arguments
    that would overflow saturate to MIN_INT64 if negative or MAX_INT64 if positive.
    """

    def to_bytes(self, count: int) -> int: ...


@dataclass(frozen=True)
class ConversionStep:
    """
    One precomputed conversion between two levels.

    A growing step (coarse source, fine target) multiplies by factor with saturation,
    using the precomputed threshold over = MAX_INT64 // factor. A shrinking step divides
    by factor and truncates toward zero. The identity step is a growing step with factor 1.
    """

    factor: int
    grows: bool
    over: int = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.factor, int) or self.factor < 1:
            raise ValueError(f"factor must be a positive int, got {fmt_value(self.factor)}")
        object.__setattr__(self, 'over', MAX_INT64 // self.factor)

    @classmethod
    def between(cls, source_scale: int, target_scale: int) -> Self:
        """
        Derive the step converting a count of source_scale units into target_scale units.

        Raises:
            ValueError: If the larger scale is not an exact multiple of the smaller one.
        """
        if source_scale >= target_scale:
            factor, remainder = divmod(source_scale, target_scale)
            grows = True
        else:
            factor, remainder = divmod(target_scale, source_scale)
            grows = False

        if remainder:
            raise ValueError(
                f"scales {source_scale} and {target_scale} do not have an exact integer ratio"
            )
        return cls(factor=factor, grows=grows)

    def apply(self, count: int) -> int:
        """Convert count, saturating or truncating as this step requires."""
        if self.factor == 1:
            return count
        if not self.grows:
            return truncated_divide(count, self.factor)

        return saturated_multiply(count, self.factor, self.over)


@dataclass(frozen=True)
class UnitFamily:
    """
    Immutable description of one unit family.

    Attributes:
        unit_name: Plural base unit name used in error messages ("bytes", "bits").
        labels: Display labels, finest first; one per level.
        step: Ratio between adjacent levels (1000 or 1024).
        units_per_byte: Base units per byte (1 for byte families, 8 for bits).
        scales: Exact scale of each level in base units, step ** ordinal.
        table: (source ordinal, target ordinal) -> ConversionStep.
        byte_steps: Per-level ConversionStep into bytes.
    """

    unit_name: str
    labels: tuple[str, ...]
    step: int
    units_per_byte: int = 1

    scales: tuple[int, ...] = field(init=False)
    table: frozendict = field(init=False, repr=False)
    byte_steps: tuple[ConversionStep, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if len(self.labels) < 1:
            raise ValueError("a unit family needs at least one label")
        if self.step < 2:
            raise ValueError(f"step must be >= 2, got {self.step}")

        scales = tuple(self.step ** ordinal for ordinal in range(len(self.labels)))
        table = frozendict({
            (source, target): ConversionStep.between(scales[source], scales[target])
            for source in range(len(scales))
            for target in range(len(scales))
        })
        byte_steps = tuple(ConversionStep.between(scale, self.units_per_byte) for scale in scales)

        object.__setattr__(self, 'scales', scales)
        object.__setattr__(self, 'table', table)
        object.__setattr__(self, 'byte_steps', byte_steps)

    def __len__(self) -> int:
        return len(self.labels)


class ScaledUnit:
    """
    Mixin for unit family Enums whose member values are level ordinals.

    The Enum must be decorated with @unit_family(...) which attaches its UnitFamily.
    """

    _family: UnitFamily

    @property
    def family(self) -> UnitFamily:
        return type(self)._family

    @property
    def label(self) -> str:
        """Display label of this level, e.g. 'KiB'."""
        return self._family.labels[self.value]

    @property
    def scale(self) -> int:
        """Exact size of one unit of this level in the family's base unit."""
        return self._family.scales[self.value]

    def convert(self, count: int, source_unit: Self) -> int:
        """
        Convert count given in source_unit into this unit.

        Conversions from finer to coarser levels truncate, so converting 999 bytes to
        kilobytes gives 0. Conversions from coarser to finer levels that would overflow
        saturate to MIN_INT64 if negative or MAX_INT64 if positive.

        Args:
            count: Size in source_unit.
            source_unit: Unit of count; must belong to the same family.

        Returns:
            The converted size in this unit.

        Raises:
            TypeError: If source_unit is not a member of this unit's family,
                or count is not an integer.
            ValueError: If count is outside signed 64-bit range.
        """
        if not isinstance(source_unit, type(self)):
            raise TypeError(
                f"source_unit must be a {type(self).__name__}, got {fmt_value(source_unit)}"
            )
        count = std_int64(count)
        return self._family.table[(source_unit.value, self.value)].apply(count)

    def to_bytes(self, count: int) -> int:
        """Convert count in this unit to bytes, truncating or saturating as needed."""
        count = std_int64(count)
        return self._family.byte_steps[self.value].apply(count)

    @classmethod
    def format(cls, count: int, fmt: "str | NumberFormatter | Callable[[float], str] | None" = None) -> str:
        """
        Return count base units as a human-readable string, e.g. "1.2 MiB".

        This is a classmethod: count is always in the family's finest unit (bytes or bits),
        whichever member it is reached through. Convert first to format a size held in a
        coarser unit, e.g. BinaryByteUnit.format(BinaryByteUnit.MEBIBYTES.to_bytes(2)).

        Args:
            count: Non-negative size in the family's finest unit.
            fmt: Number formatter: None for the default "#,##0.#" pattern, a pattern
                string, a NumberFormatter, or a callable float -> str.

        Raises:
            ValueError: If count is negative, with message "<unit-name> < 0: <count>".
        """
        return format_count(count, cls._family, fmt)


# Methods --------------------------------------------------------------------------------------------------------------

def unit_family(
        *,
        unit_name: str,
        labels: tuple[str, ...],
        step: int,
        units_per_byte: int = 1,
) -> Callable[[type], type]:
    """
    Class decorator attaching a UnitFamily to a ScaledUnit Enum.

    Member values must be exactly the ordinals 0..len(labels)-1.

    Raises:
        ValueError: If members and labels are out of sync.
    """
    family = UnitFamily(unit_name=unit_name, labels=labels, step=step, units_per_byte=units_per_byte)

    def decorate(cls: type) -> type:
        ordinals = [member.value for member in cls]
        if ordinals != list(range(len(family))):
            raise ValueError(
                f"{cls.__name__} member values must be ordinals 0..{len(family) - 1}, got {ordinals}"
            )
        cls._family = family
        return cls

    return decorate


def format_count(
        count: int,
        family: UnitFamily,
        fmt: "str | NumberFormatter | Callable[[float], str] | None" = None,
) -> str:
    """
    Format count as "<number> <label>" picking the largest level that keeps the number below step.

    The working value is divided by family.step while it is at least step and a coarser
    label remains. The loop stops at the last label, so MAX_INT64 bytes in the binary
    family render as "8,192 PiB" rather than inventing an exbibyte label.

    Examples:
        >>> format_count(1234567, BinaryByteUnit.BYTES.family)
        '1.2 MiB'
    """
    count = std_int64(count)
    if count < 0:
        raise ValueError(f"{family.unit_name} < 0: {count}")

    formatter = resolve_formatter(fmt)

    index = 0
    value = float(count)
    while value >= family.step and index < len(family.labels) - 1:
        value /= family.step
        index += 1

    return f"{formatter(value)} {family.labels[index]}"
