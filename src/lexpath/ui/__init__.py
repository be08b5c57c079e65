"""User interfaces for lexpath."""
