from pathlib import Path
import unittest

from population.chart import render_chart, short_year
from population.filters import YearStride


class ShortYearTests(unittest.TestCase):
    def test_drops_century(self):
        self.assertEqual(short_year(1986), "86")
        self.assertEqual(short_year(2000), "00")
        self.assertEqual(short_year(2023), "23")


class RenderChartTests(unittest.TestCase):
    def setUp(self):
        self.dataset = Path(__file__).with_name("ssb_sample.csv").read_text(encoding="utf-8")

    def test_series(self):
        chart = render_chart(
            self.dataset, "0301", YearStride.EVERY_TEN_YEARS, access_date="18 October 2026"
        )
        self.assertIn("{{Graph:Chart", chart)
        self.assertIn("|x=90,00,10,20\n", chart)
        self.assertIn("|y=475395,540395,605395,670395\n", chart)
        self.assertTrue(chart.endswith("}}"))

    def test_caption_and_citation(self):
        chart = render_chart(
            self.dataset, "4601", YearStride.EVERY_YEAR, access_date="18 October 2026"
        )
        first_line = chart.splitlines()[0]
        self.assertTrue(first_line.startswith('Population development<ref name="SSB26975">'))
        self.assertIn("access-date=18 October 2026", first_line)
        self.assertIn("|x=20,22\n|y=285911,289330\n", chart)

    def test_unmatched_code_returns_empty_text(self):
        self.assertEqual(render_chart(self.dataset, "9999", YearStride.EVERY_YEAR), "")

    def test_empty_and_missing_dataset(self):
        self.assertEqual(render_chart("", "0301", YearStride.EVERY_YEAR), "")
        self.assertEqual(render_chart(None, "0301", YearStride.EVERY_YEAR), "")


if __name__ == "__main__":
    unittest.main()
