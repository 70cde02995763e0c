"""User-facing interfaces for textconverter."""
