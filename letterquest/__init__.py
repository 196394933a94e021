"""Ocean Letter Quest: a fish collects letter bubbles and spells ocean words."""

__version__ = "1.0.0"
