"""
Owner/voter record linkage.

Matches property owners against the voter roll by name, zip and address
and ranks the matches by confidence.
"""

__version__ = "1.0.0"
