"""
Visores interactivos en terminal.
"""
