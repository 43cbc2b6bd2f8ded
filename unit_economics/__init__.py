"""LTGP:CAC growth quadrant calculator.

Classifies a customer-acquisition scenario (CAC, CFA, LTGP) into one of four
growth quadrants, estimates the payback period and produces a verdict.
"""
