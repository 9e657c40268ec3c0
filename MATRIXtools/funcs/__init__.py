"""
MATRIXtools numerical modules.

Each sub-package follows the same layout: constants.py, core_functions.py
(Numba kernels and NumPy fallbacks) and operations.py (the public class).
"""
