"""Battery runtime tracking, estimation and a text status screen for a watch face."""

__version__ = "1.0.0"