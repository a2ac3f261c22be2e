import unittest

from addrmap.RangeMap import RangeMap
from addrmap.RangeMapOptions import RangeMapOptions


class TestRangeMapOptions(unittest.TestCase):
    def test_defaults(self):
        options = RangeMapOptions()
        self.assertTrue(options.warn_on_residual_overlap)
        self.assertTrue(options.log_merges)

    def test_map_uses_default_options(self):
        self.assertEqual(RangeMap().options, RangeMapOptions())

    def test_merge_logging_can_be_disabled(self):
        range_map = RangeMap(RangeMapOptions(log_merges=False))
        range_map.put(0, 10, "a")
        with self.assertNoLogs("addrmap.RangeMap", level="DEBUG"):
            range_map.put(5, 15, "b")
        self.assertEqual(range_map.get(15), "b")


if __name__ == "__main__":
    unittest.main()
