import unittest
from unittest import mock
from unit_economics.growth import engine
from unit_economics.growth.classifier import CacLevel, CfaLevel, Quadrant
from unit_economics.growth.engine import evaluate, evaluate_values, result_as_dict
from unit_economics.growth.inputs import DEFAULT_LOW_CAC_FRACTION, InvalidInput, ScenarioInput
from unit_economics.growth.payback import PaybackStatus
from unit_economics.growth.verdict import Tone

class TestEngine(unittest.TestCase):
    def test_defaults(self):
        s = ScenarioInput(cac=200, cfa=0, ltgp=2500)
        self.assertEqual(s.low_cac_fraction, DEFAULT_LOW_CAC_FRACTION)
        self.assertEqual(s.low_cac_fraction, 0.10)
        self.assertEqual(s.early_gp_rate, 0.0)
        self.assertEqual(s.period_label, "days")

    def test_self_funding_growth(self):
        r = evaluate(ScenarioInput(cac=200, cfa=200, ltgp=2500))
        self.assertIs(r.quadrant, Quadrant.SELF_FUNDING_GROWTH)
        self.assertEqual(r.net_outlay, 0.0)
        self.assertAlmostEqual(r.ratio, 12.5)
        self.assertIs(r.tone, Tone.EXCELLENT)
        self.assertIs(r.payback.status, PaybackStatus.IMMEDIATE)

    def test_capital_intensive_trap(self):
        r = evaluate_values(cac=400, cfa=150, ltgp=2500, early_gp_rate=2)
        self.assertIs(r.quadrant, Quadrant.CAPITAL_INTENSIVE_TRAP)
        self.assertIs(r.classification.cac_level, CacLevel.HIGH)
        self.assertIs(r.classification.cfa_level, CfaLevel.LOW)
        self.assertAlmostEqual(r.net_outlay, 250.0)
        self.assertAlmostEqual(r.payback.periods, 5.0)
        self.assertIs(r.tone, Tone.FRAGILE)
        self.assertEqual(r.verdict[:7], "Fragile")

    def test_net_outlay_can_be_negative(self):
        r = evaluate_values(cac=400, cfa=500, ltgp=2500)
        self.assertAlmostEqual(r.net_outlay, -100.0)
        self.assertEqual(r.payback.net_to_recover, 0.0)

    def test_payback_and_undefined(self):
        r = evaluate_values(cac=500, cfa=200, ltgp=2500, early_gp_rate=50)
        self.assertAlmostEqual(r.payback.periods, 0.24)
        r2 = evaluate_values(cac=500, cfa=0, ltgp=2500, early_gp_rate=0)
        self.assertIs(r2.payback.status, PaybackStatus.UNDEFINED)
        self.assertIsNone(r2.payback.periods)

    def test_period_label_does_not_change_numbers(self):
        results = [evaluate_values(cac=500, cfa=200, ltgp=2500, early_gp_rate=12, period_label=p)
                   for p in ("days", "weeks", "months", "years")]
        self.assertEqual(len({r.payback.periods for r in results}), 1)
        self.assertEqual(len({r.quadrant for r in results}), 1)
        self.assertEqual(len({r.verdict for r in results}), 1)

    def test_invalid_raises_before_classification(self):
        with mock.patch.object(engine, "classify_regions") as cls:
            with self.assertRaises(InvalidInput) as ctx:
                evaluate_values(cac=0, cfa=0, ltgp=2500)
            self.assertEqual(ctx.exception.field, "cac")
            with self.assertRaises(InvalidInput) as ctx:
                evaluate_values(cac=100, cfa=0, ltgp=-5)
            self.assertEqual(ctx.exception.field, "ltgp")
            with self.assertRaises(InvalidInput):
                evaluate_values(cac=100, cfa=0, ltgp=2500, early_gp_rate=150)
            cls.assert_not_called()

    def test_huge_integer_is_invalid_input(self):
        with self.assertRaises(InvalidInput) as ctx:
            evaluate_values(cac=10**400, cfa=0, ltgp=2500)
        self.assertEqual(ctx.exception.field, "cac")
        with self.assertRaises(InvalidInput) as ctx:
            evaluate_values(cac=100, cfa=10**400, ltgp=2500)
        self.assertEqual(ctx.exception.field, "cfa")

    def test_unrepresentable_ratio_is_invalid_input(self):
        with mock.patch.object(engine, "classify_regions") as cls:
            with self.assertRaises(InvalidInput) as ctx:
                evaluate_values(cac=1e-10, cfa=0, ltgp=1e308)
            self.assertEqual(ctx.exception.field, "ltgp")
            cls.assert_not_called()

    def test_result_as_dict(self):
        d = result_as_dict(evaluate_values(cac=500, cfa=200, ltgp=2500, early_gp_rate=50, period_label="weeks"))
        self.assertEqual(d["quadrant"], "capital_intensive_trap")
        self.assertEqual(d["cac_level"], "high")
        self.assertEqual(d["cfa_level"], "low")
        self.assertEqual(d["payback"]["status"], "estimated")
        self.assertEqual(d["payback"]["period"], "weeks")
        self.assertAlmostEqual(d["payback"]["approx_days"], 0.24 * 7)
        self.assertEqual(d["inputs"]["period"], "weeks")

if __name__ == '__main__':
    unittest.main()
