"""Growth economics core: pure, deterministic functions.

- inputs.py: ScenarioInput, InvalidInput and validation guards
- classifier.py: CAC/CFA levels and quadrant placement
- payback.py: payback period estimate (or an explicit undefined marker)
- verdict.py: quadrant + ratio + net outlay -> guidance text
- engine.py: runs the three in sequence and builds a ScenarioResult
"""
