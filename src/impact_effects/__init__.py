"""Impact effects: physical-effects reports for near-Earth object impacts."""

__version__ = "0.1.0"
