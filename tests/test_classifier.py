import itertools
import unittest
from unit_economics.growth.classifier import (
    CacLevel,
    CfaLevel,
    Quadrant,
    QUADRANT_TABLE,
    classify,
    classify_regions,
)
from unit_economics.growth.inputs import InvalidInput

class TestClassifier(unittest.TestCase):
    def test_four_scenarios(self):
        self.assertEqual(classify(200, 200, 2500, 0.10), Quadrant.SELF_FUNDING_GROWTH)
        self.assertEqual(classify(200, 80, 2500), Quadrant.CASH_LIGHT_EFFICIENCY)
        self.assertEqual(classify(400, 250, 2500), Quadrant.DEFERRED_CASH_RISK)
        self.assertEqual(classify(400, 150, 2500), Quadrant.CAPITAL_INTENSIVE_TRAP)

    def test_cac_boundary_inclusive_to_low(self):
        c = classify_regions(cac=250, cfa=250, ltgp=2500, low_cac_fraction=0.10)
        self.assertEqual(c.cac_level, CacLevel.LOW)
        self.assertAlmostEqual(c.cac_cut, 250.0)
        c2 = classify_regions(cac=250.0001, cfa=250, ltgp=2500, low_cac_fraction=0.10)
        self.assertEqual(c2.cac_level, CacLevel.HIGH)

    def test_cfa_boundary_inclusive_to_high(self):
        self.assertEqual(classify_regions(200, 100, 2500).cfa_level, CfaLevel.HIGH)
        self.assertEqual(classify_regions(200, 99.999, 2500).cfa_level, CfaLevel.LOW)

    def test_table_is_complete_and_consistent(self):
        self.assertEqual(len(QUADRANT_TABLE), 4)
        self.assertEqual(set(QUADRANT_TABLE.values()), set(Quadrant))
        for (c, f), q in QUADRANT_TABLE.items():
            self.assertEqual(q.cac_level, c)
            self.assertEqual(q.cfa_level, f)

    def test_levels_agree_with_quadrant_over_grid(self):
        for cac, cfa, ltgp, frac in itertools.product(
            [1, 100, 250, 400, 5000], [0, 50, 100, 200, 10000], [100, 2500], [0.05, 0.10, 1.0]
        ):
            c = classify_regions(cac, cfa, ltgp, frac)
            self.assertIs(c.quadrant, QUADRANT_TABLE[(c.cac_level, c.cfa_level)])
            self.assertEqual(c.cac_level is CacLevel.LOW, cac <= frac * ltgp)
            self.assertEqual(c.cfa_level is CfaLevel.HIGH, cfa >= 0.5 * cac)
            # same inputs, same answer
            self.assertIs(classify(cac, cfa, ltgp, frac), c.quadrant)

    def test_full_fraction_makes_every_cac_up_to_ltgp_low(self):
        self.assertEqual(classify_regions(2500, 0, 2500, 1.0).cac_level, CacLevel.LOW)

    def test_invalid_inputs(self):
        cases = [
            ((0, 10, 2500, 0.1), "cac"),
            ((-1, 10, 2500, 0.1), "cac"),
            ((100, -0.01, 2500, 0.1), "cfa"),
            ((100, 10, -5, 0.1), "ltgp"),
            ((100, 10, 0, 0.1), "ltgp"),
            ((100, 10, 2500, 0.0), "low_cac_fraction"),
            ((100, 10, 2500, 1.5), "low_cac_fraction"),
            ((float("nan"), 10, 2500, 0.1), "cac"),
            ((100, 10, float("inf"), 0.1), "ltgp"),
        ]
        for args, field in cases:
            with self.assertRaises(InvalidInput) as ctx:
                classify(*args)
            self.assertEqual(ctx.exception.field, field)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            classify(0, 0, 2500)

    def test_quadrant_titles(self):
        self.assertEqual(Quadrant.SELF_FUNDING_GROWTH.title, "Self-Funding Growth")
        self.assertEqual(Quadrant.CAPITAL_INTENSIVE_TRAP.title, "Capital-Intensive Trap")
        for q in Quadrant:
            self.assertTrue(q.description)

if __name__ == '__main__':
    unittest.main()
