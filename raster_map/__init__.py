"""Dense 2D integer raster with BFS traversal and rasterization."""
