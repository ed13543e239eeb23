#
# ByteUnits - Decimal Byte Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from byteunits.decimal_byte import DecimalByteUnit
from byteunits.formatters import DecimalFormat
from byteunits.numeric import MAX_INT64, MIN_INT64

B, KB, MB, GB, TB, PB = (
    DecimalByteUnit.BYTES,
    DecimalByteUnit.KILOBYTES,
    DecimalByteUnit.MEGABYTES,
    DecimalByteUnit.GIGABYTES,
    DecimalByteUnit.TERABYTES,
    DecimalByteUnit.PETABYTES,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDecimalByteUnitConvert:

    def test_convert_small_magnitudes(self):
        """Every level pair over 0..998 matches exact integer arithmetic."""
        for s in range(999):
            assert B.to_kilobytes(s) == s // 1000
            assert B.to_megabytes(s) == s // 1000 ** 2
            assert B.to_gigabytes(s) == s // 1000 ** 3
            assert B.to_terabytes(s) == s // 1000 ** 4
            assert B.to_petabytes(s) == s // 1000 ** 5

            assert KB.to_bytes(s) == s * 1000
            assert KB.to_megabytes(s) == s // 1000
            assert KB.to_gigabytes(s) == s // 1000 ** 2
            assert KB.to_terabytes(s) == s // 1000 ** 3
            assert KB.to_petabytes(s) == s // 1000 ** 4

            assert MB.to_bytes(s) == s * 1000 ** 2
            assert MB.to_kilobytes(s) == s * 1000
            assert MB.to_gigabytes(s) == s // 1000
            assert MB.to_terabytes(s) == s // 1000 ** 2
            assert MB.to_petabytes(s) == s // 1000 ** 3

            assert GB.to_bytes(s) == s * 1000 ** 3
            assert GB.to_kilobytes(s) == s * 1000 ** 2
            assert GB.to_megabytes(s) == s * 1000
            assert GB.to_terabytes(s) == s // 1000
            assert GB.to_petabytes(s) == s // 1000 ** 2

            assert TB.to_bytes(s) == s * 1000 ** 4
            assert TB.to_kilobytes(s) == s * 1000 ** 3
            assert TB.to_megabytes(s) == s * 1000 ** 2
            assert TB.to_gigabytes(s) == s * 1000
            assert TB.to_petabytes(s) == s // 1000

            assert PB.to_bytes(s) == s * 1000 ** 5
            assert PB.to_kilobytes(s) == s * 1000 ** 4
            assert PB.to_megabytes(s) == s * 1000 ** 3
            assert PB.to_gigabytes(s) == s * 1000 ** 2
            assert PB.to_terabytes(s) == s * 1000

    @pytest.mark.parametrize(
        "target, count, source, expected",
        [
            pytest.param(B, 10, KB, 10_000, id="kilobytes-to-bytes"),
            pytest.param(KB, 999, B, 0, id="truncate"),
            pytest.param(KB, 1999, B, 1, id="truncate-remainder"),
            pytest.param(KB, -1999, B, -1, id="truncate-negative"),
            pytest.param(GB, 3, PB, 3_000_000, id="petabytes-to-gigabytes"),
            pytest.param(MB, MAX_INT64, B, MAX_INT64 // 1000 ** 2, id="max-down"),
        ],
    )
    def test_convert(self, target, count, source, expected):
        assert target.convert(count, source) == expected

    @pytest.mark.parametrize(
        "unit, ratio",
        [
            pytest.param(KB, 1000, id="kilobytes"),
            pytest.param(MB, 1000 ** 2, id="megabytes"),
            pytest.param(GB, 1000 ** 3, id="gigabytes"),
            pytest.param(TB, 1000 ** 4, id="terabytes"),
            pytest.param(PB, 1000 ** 5, id="petabytes"),
        ],
    )
    def test_to_bytes_saturates(self, unit, ratio):
        """Clamp at the signed 64-bit bounds exactly past the threshold."""
        over = MAX_INT64 // ratio
        assert unit.to_bytes(over) == over * ratio
        assert unit.to_bytes(over + 1) == MAX_INT64
        assert unit.to_bytes(-over) == -over * ratio
        assert unit.to_bytes(-over - 1) == MIN_INT64
        assert unit.to_bytes(MAX_INT64) == MAX_INT64
        assert unit.to_bytes(MIN_INT64) == MIN_INT64

    def test_petabytes_to_terabytes_saturates(self):
        assert PB.to_terabytes(MAX_INT64 // 1000 + 1) == MAX_INT64
        assert PB.to_terabytes(-(MAX_INT64 // 1000) - 1) == MIN_INT64


class TestDecimalByteUnitFormat:

    @pytest.mark.parametrize(
        "count, expected",
        [
            pytest.param(0, "0 B", id="zero"),
            pytest.param(1, "1 B", id="one"),
            pytest.param(1000, "1 KB", id="kilo"),
            pytest.param(1001, "1 KB", id="kilo-plus-one"),
            pytest.param(1024, "1 KB", id="1024"),
            pytest.param(1050, "1.1 KB", id="half-stored-above"),
            pytest.param(1150, "1.1 KB", id="half-stored-below"),
            pytest.param(2050, "2 KB", id="half-stored-below-two"),
            pytest.param(16000, "16 KB", id="sixteen-kilo"),
            pytest.param(1177171, "1.2 MB", id="mega"),
            pytest.param(1200000000, "1.2 GB", id="giga"),
            pytest.param(MAX_INT64, "9,223.4 PB", id="max"),
        ],
    )
    def test_format(self, count, expected):
        assert DecimalByteUnit.format(count) == expected

    @pytest.mark.parametrize(
        "count, expected",
        [
            pytest.param(0, "0.0 B", id="zero"),
            pytest.param(1, "1.0 B", id="one"),
            pytest.param(1000, "1.0 KB", id="kilo"),
            pytest.param(1001, "1.0 KB", id="kilo-plus-one"),
            pytest.param(16000, "16.0 KB", id="sixteen-kilo"),
            pytest.param(1177171, "1.18 MB", id="mega"),
        ],
    )
    def test_format_with_pattern(self, count, expected):
        assert DecimalByteUnit.format(count, "0.0#") == expected

    def test_format_with_formatter(self):
        fmt = DecimalFormat("#.##", locale="fr")
        assert DecimalByteUnit.format(16000, fmt) == "16 KB"
        assert DecimalByteUnit.format(1177171, fmt) == "1,18 MB"

    def test_format_with_callable(self):
        assert DecimalByteUnit.format(1500, lambda v: f"{v:.2f}") == "1.50 KB"

    @pytest.mark.parametrize(
        "fmt",
        [
            pytest.param(None, id="default"),
            pytest.param("#.##", id="pattern"),
            pytest.param(DecimalFormat("#.##", locale="fr"), id="formatter"),
        ],
    )
    def test_format_negative(self, fmt):
        with pytest.raises(ValueError, match=r"^bytes < 0: -1$"):
            DecimalByteUnit.format(-1, fmt)
