"""Building blocks for a melee combat damage simulator: statistics, timing, hit tables, rage, damage and gear."""

__version__ = "0.1.0"