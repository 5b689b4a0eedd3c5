"""Lambda handlers for the patient record service."""

__version__ = "0.1.0"
