"""Site navigation menu."""
