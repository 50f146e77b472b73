"""SimpleMed radiology: offline-first scan data layer."""

__version__ = "0.1.0"
