import pytest

from MunsellSpectrum.Converter import ClosestHue, ClosestIntKey, ConverterFactory, MunsellConverter, NearestKeyTable
from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB
from MunsellSpectrum.Utils.Errors import EmptyTable, UnknownHue
from MunsellSpectrum.Utils.IO import SaveMunsellToRGBRows, SaveRGBToMunsellRows


def color(prefix, number, value, chroma):
    return MunsellColor(Hue(prefix, number), value, chroma)


class TestClosestKeys:

    def test_truncated_target_wins(self):
        assert ClosestIntKey(4.7, [1, 4, 9]) == 4
        assert ClosestIntKey(4.0, {4: None, 5: None}) == 4

    def test_nearest_key(self):
        assert ClosestIntKey(8.2, [1, 5, 9]) == 9
        assert ClosestIntKey(-3, [2, 4]) == 2
        assert ClosestIntKey(30, [2, 4]) == 4

    def test_tie_keeps_first_key(self):
        assert ClosestIntKey(7, [1, 5, 9]) == 5
        assert ClosestIntKey(7, [9, 5, 1]) == 9

    def test_closest_hue(self):
        hues = [Hue("R", 2.5), Hue("R", 5), Hue("B", 7.5)]
        assert ClosestHue(Hue("R", 5), hues) == Hue("R", 5)
        assert ClosestHue(Hue("R", 4), hues) == Hue("R", 5)
        # only hues in the same sector are candidates
        assert ClosestHue(Hue("B", 2.5), hues) == Hue("B", 7.5)

    def test_closest_hue_unknown_prefix(self):
        with pytest.raises(UnknownHue):
            ClosestHue(Hue("P", 5), [Hue("R", 2.5)])


class TestNearestKeyTable:

    def test_first_row_wins(self):
        table = NearestKeyTable([(1, 1, 1, "a"), (1, 1, 2, "b"), (1, 1, 1, "c")])
        assert len(table) == 2
        assert table.duplicates == 1
        assert table.lookup(1, 1, 1) == "a"
        assert (1, 1, 2) in table

    def test_levels_keep_insertion_order(self):
        table = NearestKeyTable([(2, 5, 1, "a"), (1, 3, 1, "b"), (2, 1, 1, "c"), (2, 5, 0, "d")])
        assert table.first_keys() == [2, 1]
        assert list(table.level(2)) == [(5, [1, 0]), (1, [1])]

    def test_snaps_every_level(self):
        table = NearestKeyTable([(0, 0, 0, "dark"), (200, 200, 200, "light")])
        assert table.lookup(30, 190, 180) == "dark"
        assert table.lookup(150, 10, 10) == "light"


class TestMunsellToRGB:

    def test_exact_lookup(self, converter):
        assert converter.from_munsell(color("R", 2.5, 1, 2)) == RGB(45, 21, 31)
        assert converter.from_munsell(color("R", 5, 5, 20)) == RGB(230, 10, 40)
        assert converter.from_munsell(color("G", 7.5, 5, 16)) == RGB(20, 150, 100)

    def test_nearest_hue(self, converter):
        assert converter.from_munsell(color("R", 4, 1, 2)) == RGB(50, 20, 28)
        assert converter.from_munsell(color("R", 0.5, 1, 2)) == RGB(45, 21, 31)

    def test_hue_tie_keeps_earliest(self, converter):
        assert converter.from_munsell(color("R", 3.75, 1, 2)) == RGB(45, 21, 31)
        # B7.5 comes before B2.5 in the table
        assert converter.from_munsell(color("B", 5, 4, 14)) == RGB(20, 56, 109)

    def test_value_tie_keeps_earliest(self, converter):
        assert converter.from_munsell(color("R", 5, 7, 16)) == RGB(230, 10, 40)

    def test_truncated_value_wins(self, converter):
        assert converter.from_munsell(color("R", 2.5, 2.9, 2)) == RGB(70, 45, 50)

    def test_nearest_chroma(self, converter):
        assert converter.from_munsell(color("R", 2.5, 2.9, 5.9)) == RGB(110, 30, 45)

    def test_out_of_range_snaps(self, converter):
        assert converter.from_munsell(color("R", 6, 17, 22)) == RGB(240, 220, 220)
        assert converter.from_munsell(color("R", 6, 17, 22)) == converter.from_munsell(color("R", 5, 10, 20))

    def test_unknown_hue(self, converter):
        with pytest.raises(UnknownHue):
            converter.from_munsell(color("P", 5, 5, 10))

    def test_idempotent(self, converter):
        target = color("YR", 4, 7, 9)
        assert converter.from_munsell(target) == converter.from_munsell(target) == RGB(200, 130, 80)


class TestRGBToMunsell:

    def test_exact_lookup(self, converter):
        assert converter.from_rgb(RGB(0, 34, 17)) == color("G", 1.36, 1.00, 3.83)
        assert converter.from_rgb(RGB(20, 103, 104)) == color("BG", 9.79, 5, 6)

    def test_nearest_lookup(self, converter):
        assert converter.from_rgb(RGB(254, 1, 1)) == converter.from_rgb(RGB(255, 0, 0))
        assert converter.from_rgb(RGB(20, 100, 100)) == color("BG", 9.79, 5, 6)

    def test_duplicate_keeps_first(self, converter):
        assert converter.from_rgb(RGB(0, 34, 17)).hue == Hue("G", 1.36)


class TestTables:

    def test_sentinel_rows_dropped(self, converter):
        assert converter.rejected == 2

    def test_list_hues(self, converter):
        hues = [str(hue) for hue in converter.list_hues()]
        assert hues == ["2.5R", "5R", "7.5G", "7.5B", "10BG", "5YR", "2.5B"]

    def test_color_grid(self, converter):
        grid = converter.color_grid(Hue("R", 2.5))
        assert [len(row) for row in grid] == [2, 4, 3]
        assert grid[0][0] == MunsellColor.n(3)
        assert grid[0][1] == color("R", 2.5, 3, 2)
        assert grid[2] == [MunsellColor.n(1), color("R", 2.5, 1, 2), color("R", 2.5, 1, 4)]

    def test_color_grid_nearest_hue(self, converter):
        assert converter.color_grid(Hue("R", 3)) == converter.color_grid(Hue("R", 2.5))

    def test_highest_chroma(self, converter):
        assert converter.highest_chroma(Hue("R", 5)) == color("R", 5, 5, 20)
        assert converter.highest_chroma(Hue("R", 2.5)) == color("R", 2.5, 2, 6)

    def test_highest_chroma_tie_goes_to_last(self, rgb_to_munsell_rows):
        rows = [(Hue("G", 5), 1, 4, RGB(0, 40, 0)), (Hue("G", 5), 2, 4, RGB(0, 80, 0)),
                (Hue("G", 5), 3, 2, RGB(0, 120, 0))]
        converter = MunsellConverter(rows, rgb_to_munsell_rows)
        assert converter.highest_chroma(Hue("G", 5)) == color("G", 5, 2, 4)

    def test_empty_tables(self, munsell_to_rgb_rows, rgb_to_munsell_rows):
        with pytest.raises(EmptyTable):
            MunsellConverter([], rgb_to_munsell_rows)
        with pytest.raises(EmptyTable):
            MunsellConverter(munsell_to_rgb_rows, [])
        with pytest.raises(EmptyTable):
            MunsellConverter([(Hue("R", 5), 0, 2, RGB(1, 1, 1))], rgb_to_munsell_rows)


@pytest.fixture
def table_paths(tmp_path, munsell_to_rgb_rows, rgb_to_munsell_rows):
    m2r = tmp_path / "Munsell2RGB.csv"
    r2m = tmp_path / "RGB2Munsell.csv"
    SaveMunsellToRGBRows(munsell_to_rgb_rows, str(m2r))
    SaveRGBToMunsellRows(rgb_to_munsell_rows, str(r2m))
    yield str(m2r), str(r2m)
    ConverterFactory.clear()


class TestLoading:

    def test_from_csv(self, table_paths):
        converter = MunsellConverter.from_csv(*table_paths)
        assert converter.rejected == 2
        assert converter.from_munsell(color("R", 2.5, 1, 2)) == RGB(45, 21, 31)
        assert converter.from_rgb(RGB(0, 34, 17)) == color("G", 1.36, 1.00, 3.83)
        assert len(converter.list_hues()) == 7

    def test_factory_caches(self, table_paths):
        first = ConverterFactory.get_object(*table_paths)
        assert ConverterFactory.get_object(*table_paths) is first

    def test_factory_reads_environment(self, table_paths, monkeypatch):
        monkeypatch.setenv("MUNSELL_TO_RGB_CSV", table_paths[0])
        monkeypatch.setenv("RGB_TO_MUNSELL_CSV", table_paths[1])
        converter = ConverterFactory.get_object()
        assert converter is ConverterFactory.get_object(*table_paths)

    def test_factory_needs_both_paths(self, table_paths, monkeypatch):
        monkeypatch.delenv("RGB_TO_MUNSELL_CSV", raising=False)
        with pytest.raises(ValueError):
            ConverterFactory.get_object(table_paths[0])

    def test_missing_file(self, tmp_path, table_paths):
        with pytest.raises(FileNotFoundError):
            MunsellConverter.from_csv(str(tmp_path / "missing.csv"), table_paths[1])


def test_empty_csv_is_an_empty_table(tmp_path, table_paths):
    empty = tmp_path / "empty.csv"
    empty.write_text("")
    with pytest.warns(UserWarning, match="is empty"):
        with pytest.raises(EmptyTable):
            MunsellConverter.from_csv(str(empty), table_paths[1])
