"""Numeric algorithms of the box plot layout engine.

Pure numpy/stdlib implementations with no drawing context:
- quartile: five-number summary and Tukey outliers for one series
- nice_scale: shared axis range and "nice" tick selection
"""
