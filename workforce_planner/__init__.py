"""
Warehouse workforce planning service.

Forecast orders are routed across packing methods (Field Table, Pre-pack,
Standard), converted into work hours and headcount, priced, and turned
into a ranked list of hiring alerts and optimization recommendations.
"""

__version__ = "2.0.0"
