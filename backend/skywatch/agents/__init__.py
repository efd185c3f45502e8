"""Claude-backed writers."""
