"""Weekly canteen menus."""
