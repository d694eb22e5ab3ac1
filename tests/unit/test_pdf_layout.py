from docintake.pdf.layout import assemble_page, group_lines, line_key
from docintake.pdf.models import GlyphRun


class TestLineKey:
    def test_rounds_to_nearest(self) -> None:
        assert line_key(99.6) == 100
        assert line_key(100.4) == 100

    def test_rounds_halves_up(self) -> None:
        assert line_key(100.5) == 101
        assert line_key(101.5) == 102


class TestReadingOrder:
    def test_descending_y_then_ascending_x(self) -> None:
        runs = [
            GlyphRun(text="world", x=60.0, y=100.0),
            GlyphRun(text="second", x=10.0, y=80.0),
            GlyphRun(text="Hello", x=10.0, y=100.0),
            GlyphRun(text="line", x=70.0, y=80.0),
        ]
        assert assemble_page(runs) == "Hello world\nsecond line"

    def test_subpixel_jitter_stays_on_one_line(self) -> None:
        runs = [
            GlyphRun(text="B", x=50.0, y=99.7),
            GlyphRun(text="A", x=10.0, y=100.2),
        ]
        assert assemble_page(runs) == "A B"

    def test_distinct_baselines_split_lines(self) -> None:
        runs = [
            GlyphRun(text="upper", x=10.0, y=101.0),
            GlyphRun(text="lower", x=10.0, y=99.0),
        ]
        assert assemble_page(runs) == "upper\nlower"

    def test_group_lines_keeps_runs(self) -> None:
        runs = [GlyphRun(text=str(i), x=float(i), y=50.0) for i in (3, 1, 2)]
        lines = group_lines(runs)
        assert [[run.text for run in line] for line in lines] == [["1", "2", "3"]]

    def test_empty_page_is_empty_string(self) -> None:
        assert assemble_page([]) == ""
