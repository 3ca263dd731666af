import math
import unittest

from sortlab.benchmark import (
    GrowthReport,
    SizeMeasurement,
    fit_exponent,
    measure_growth,
    run_benchmark,
)
from sortlab.config import BenchmarkConfig
from sortlab.sorters import BubbleSorter, InsertionSorter


class TestFitExponent(unittest.TestCase):
    def test_linear_and_quadratic(self):
        sizes = [10, 20, 40, 80]
        self.assertAlmostEqual(fit_exponent(sizes, [3 * n for n in sizes]), 1.0, places=6)
        self.assertAlmostEqual(fit_exponent(sizes, [n * n for n in sizes]), 2.0, places=6)

    def test_too_few_points_is_nan(self):
        self.assertTrue(math.isnan(fit_exponent([10], [100])))
        self.assertTrue(math.isnan(fit_exponent([10, 20], [0, 0])))


class TestMeasureGrowth(unittest.TestCase):
    sizes = [16, 32, 64, 128]

    def test_bubble_sort_counts(self):
        report = measure_growth(BubbleSorter(), sizes=self.sizes, repeats=1, random_seed=0)
        self.assertEqual(report.algorithm, "bubble")
        self.assertEqual(report.sizes, self.sizes)
        for m in report.measurements:
            self.assertEqual(m.best_comparisons, m.size - 1)
            self.assertEqual(m.best_moves, 0)
            self.assertEqual(m.worst_comparisons, m.size * (m.size - 1))
            self.assertEqual(m.worst_moves, m.size * (m.size - 1) // 2)
            self.assertGreaterEqual(m.random_time_ms, 0.0)

    def test_insertion_sort_counts(self):
        report = measure_growth(InsertionSorter(), sizes=self.sizes, repeats=1, random_seed=0)
        for m in report.measurements:
            self.assertEqual(m.best_comparisons, m.size - 1)
            self.assertEqual(m.worst_comparisons, m.size * (m.size - 1) // 2)
            self.assertEqual(m.worst_moves, m.size * (m.size - 1) // 2)

    def test_exponents(self):
        for sorter in (BubbleSorter(), InsertionSorter()):
            report = measure_growth(sorter, sizes=self.sizes, repeats=1, random_seed=0)
            self.assertAlmostEqual(report.best_case_exponent, 1.0, delta=0.1)
            self.assertAlmostEqual(report.worst_case_exponent, 2.0, delta=0.15)

    def test_explicit_empty_sizes_rejected(self):
        with self.assertRaises(ValueError):
            measure_growth(BubbleSorter(), sizes=[], repeats=1)

    def test_invalid_sizes_and_repeats_rejected(self):
        with self.assertRaises(ValueError):
            measure_growth(BubbleSorter(), sizes=[1, 8], repeats=1)
        with self.assertRaises(ValueError):
            measure_growth(BubbleSorter(), sizes=[8, 16], repeats=0)

    def test_missing_sizes_uses_defaults(self):
        report = measure_growth(InsertionSorter(), repeats=1, random_seed=0)
        self.assertEqual(report.sizes, BenchmarkConfig().sizes)

    def test_report_to_dict(self):
        report = GrowthReport(
            algorithm="x",
            measurements=[
                SizeMeasurement(4, 3, 0, 6, 6, 0.1),
                SizeMeasurement(8, 7, 0, 28, 28, 0.2),
            ],
        )
        data = report.to_dict()
        self.assertEqual(data["algorithm"], "x")
        self.assertEqual(len(data["measurements"]), 2)
        self.assertEqual(data["measurements"][1]["worst_comparisons"], 28)

    def test_run_benchmark_uses_config(self):
        config = BenchmarkConfig(sizes=[8, 16], repeats=1, random_seed=3)
        reports = run_benchmark(config, [BubbleSorter(), InsertionSorter()])
        self.assertEqual([r.algorithm for r in reports], ["bubble", "insertion"])
        self.assertEqual(reports[0].sizes, [8, 16])


if __name__ == "__main__":
    unittest.main()
