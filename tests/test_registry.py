import unittest

from sortlab.registry import _BUILTIN_SORTERS, available_sorters, get_sorter, register_sorter
from sortlab.sorters import BubbleSorter, InsertionSorter


class ReversedBuiltinSorter:
    """Deliberately wrong sorter used to exercise external loading"""

    name = "reversed_builtin"

    def sort(self, seq, stats=None):
        seq.sort(reverse=True)
        return seq


def make_reversed_sorter():
    return ReversedBuiltinSorter()


class TestSorterRegistry(unittest.TestCase):
    def test_builtins_are_registered(self):
        self.assertIn("bubble", available_sorters())
        self.assertIn("insertion", available_sorters())
        self.assertIsInstance(get_sorter("bubble"), BubbleSorter)
        self.assertIsInstance(get_sorter("insertion"), InsertionSorter)

    def test_get_sorter_returns_fresh_instances(self):
        self.assertIsNot(get_sorter("bubble"), get_sorter("bubble"))

    def test_unknown_name_raises_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            get_sorter("quantum")
        self.assertIn("bubble", str(ctx.exception))

    def test_external_class_reference(self):
        sorter = get_sorter("test_registry:ReversedBuiltinSorter")
        self.assertEqual(sorter.sort([1, 3, 2]), [3, 2, 1])

    def test_external_factory_reference(self):
        sorter = get_sorter("test_registry:make_reversed_sorter")
        self.assertEqual(sorter.name, "reversed_builtin")

    def test_external_reference_with_missing_module(self):
        with self.assertLogs("sortlab.registry", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                get_sorter("no_such_module_here:Sorter")
        self.assertIn("cannot import module", str(ctx.exception))

    def test_external_reference_with_missing_attribute(self):
        with self.assertLogs("sortlab.registry", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                get_sorter("sortlab.sorters:QuantumSorter")
        self.assertIn("has no attribute 'QuantumSorter'", str(ctx.exception))

    def test_external_reference_without_sort_method(self):
        with self.assertLogs("sortlab.registry", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                get_sorter("sortlab.sorters:SortStats")
        self.assertIn("no sort() method", str(ctx.exception))

    def test_malformed_reference(self):
        with self.assertLogs("sortlab.registry", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                get_sorter("sortlab.sorters:")
        self.assertIn("module:attr", str(ctx.exception))

    def test_register_sorter_decorator(self):
        @register_sorter("test_only")
        class TestOnlySorter:
            name = "test_only"

            def sort(self, seq, stats=None):
                return seq

        try:
            self.assertIn("test_only", available_sorters())
            self.assertIsInstance(get_sorter("test_only"), TestOnlySorter)
        finally:
            _BUILTIN_SORTERS.pop("test_only", None)

    def test_reregistering_a_name_warns(self):
        @register_sorter("test_dup")
        class FirstSorter:
            name = "test_dup"

            def sort(self, seq, stats=None):
                return seq

        try:
            with self.assertLogs("sortlab.registry", level="WARNING") as logs:

                @register_sorter("test_dup")
                class SecondSorter(FirstSorter):
                    pass

            self.assertIn("re-registered", logs.output[0])
            self.assertIsInstance(get_sorter("test_dup"), SecondSorter)
        finally:
            _BUILTIN_SORTERS.pop("test_dup", None)


if __name__ == "__main__":
    unittest.main()
