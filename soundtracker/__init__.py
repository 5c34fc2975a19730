"""Sound Tracker: keep the sounds of a music project balanced.

Track the sounds used in a project, tag each one by frequency band, stereo
width, depth and shape, and see how the tags add up across the project.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
