"""rulecanvas - evaluation, rendering and validation of block-based rules."""

__version__ = "0.1.0"
