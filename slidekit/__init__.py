"""slidekit - carousel state machine and event protocol."""

__version__ = "1.0.0"
