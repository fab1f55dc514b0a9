"""Downloaders that write article files to disk."""

from .filenames import pdf_filename, sanitize_filename
from .pdf_downloader import PDFDownloader

__all__ = ["PDFDownloader", "pdf_filename", "sanitize_filename"]
