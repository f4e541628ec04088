"""
ProjectStore - Embedded Project Record Store

A small record store for project records (name, area, cost) implementing:
- A validated Project model with name-based identity and cost ordering
- Interchangeable storage backends (in-memory, flat-file directory)
- A thin RESTful surface over the storage contract
"""

__version__ = "0.1.0"
__author__ = "ProjectStore Team"
