"""Cloud Mock API: canned stand-in for a cloud-platform management backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
