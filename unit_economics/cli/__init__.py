"""Command line front end: flags or an interactive guided form.

Run with `python -m unit_economics.cli.main` or the `ltgp-cac` console script.
"""
