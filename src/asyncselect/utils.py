"""
Utility functions for asyncselect.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/asyncselect).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
