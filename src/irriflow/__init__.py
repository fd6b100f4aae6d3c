"""
irriflow: inflow, outflow and infiltration for surface-irrigation trials.
"""

__version__ = "0.1.0"
