"""Feature packages for lexpath."""
