"""
Plagiarism Tracer

Rabin-Karp based similarity analysis with per-word highlighting and a
step-by-step trace of the matching process.
"""

__version__ = "1.0.0"

from .core import *
from .utils import *
