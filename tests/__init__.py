"""
This __init__.py file is kept only in the root tests directory.

Test subdirectories work as namespace packages (PEP 420), so test module basenames must stay unique
across the whole tree.
"""
