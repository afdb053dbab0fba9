"""media-stats.

A tool that finds media files under a directory matching a glob pattern,
probes them with ffprobe and reports resolution, duration, codec, audio and
subtitle languages and file size as a table and optionally a CSV file.
"""

__version__ = "0.1.0"
