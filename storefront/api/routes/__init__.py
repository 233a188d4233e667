"""Route modules, one per resource. Registered explicitly in main.py."""
