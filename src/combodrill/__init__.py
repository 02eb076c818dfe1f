"""
combodrill - terminal arrow-combo reaction trainer.
"""

__version__ = "1.0.0"
