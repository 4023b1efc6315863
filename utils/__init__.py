"""
Griddler - Utilities Package
Size descriptor helpers shared by the model and the GUI.
"""
from .sizes import size_to_string, string_to_size, subgrid_size

__all__ = ['size_to_string', 'string_to_size', 'subgrid_size']
