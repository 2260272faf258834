"""Blog posts, their authors and labels."""
