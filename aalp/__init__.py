# Path: aalp/__init__.py
"""
AALP (Assertion-based Accounting Learning Platform)

Classification engine that turns a learner's logical assertions about a
business transaction into a transaction classification, corrective hints
and the resulting journal entry.

Layers follow the IPO pattern:
- dictionary/ - assertion, rule, hint and account content (INPUT)
- process/ - classification engine (PROCESS)
- core/logger/ - IPO-aware logging
"""

__version__ = '0.1.0'
