"""JAIR Harvester: download article PDFs from JAIR issue listings."""

__version__ = "1.0.0"
