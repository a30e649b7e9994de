"""Runtime configuration and report layout constants."""
