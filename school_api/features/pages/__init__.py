"""CMS pages addressed by slug."""
