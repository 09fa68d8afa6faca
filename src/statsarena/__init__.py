"""Basketball player search gateway and client-side search state machine."""

__version__ = "0.1.0"
