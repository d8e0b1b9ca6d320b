"""Desktop pygame client for SPINWHEEL."""
