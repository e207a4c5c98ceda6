"""Expected vessel calls at the Port of Santos, normalized."""

__version__ = "0.1.0"
