import pytest

from distinst.sector import Sector, SectorKind


def test_start_and_end():
    assert Sector.start() == Sector(SectorKind.START, 0)
    assert Sector.end() == Sector(SectorKind.END, 0)
    assert Sector.start() != Sector.end()


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Sector.unit, SectorKind.UNIT),
        (Sector.unit_from_end, SectorKind.UNIT_FROM_END),
        (Sector.megabyte, SectorKind.MEGABYTE),
        (Sector.megabyte_from_end, SectorKind.MEGABYTE_FROM_END),
        (Sector.percent, SectorKind.PERCENT),
    ],
)
def test_factories_keep_kind_and_value(factory, kind):
    sector = factory(42)
    assert sector.kind is kind
    assert sector.value == 42


def test_percent_bounds():
    assert Sector.percent(100).value == 100
    assert Sector.percent(0).value == 0
    with pytest.raises(ValueError):
        Sector.percent(101)


def test_large_units_allowed_up_to_u64():
    assert Sector.unit(2**64 - 1).value == 2**64 - 1
    with pytest.raises(ValueError):
        Sector.unit(2**64)


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        Sector.megabyte(-1)


def test_non_integer_value_rejected():
    with pytest.raises(TypeError):
        Sector.unit(1.5)
    with pytest.raises(TypeError):
        Sector.unit(True)


def test_sectors_are_hashable_values():
    assert {Sector.unit(7), Sector.unit(7), Sector.megabyte(7)} == {
        Sector.unit(7),
        Sector.megabyte(7),
    }