"""Presentation of a ScenarioResult.

- reports.py: human-readable evaluation text and a Markdown report
"""
