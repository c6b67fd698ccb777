"""API middleware: authentication dependencies."""
