"""
Adapters for the redirects component.
"""

from .rules import RulesAdapter
