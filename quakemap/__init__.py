"""Interactive earthquake and tectonic plate map."""

__version__ = "1.0.0"
