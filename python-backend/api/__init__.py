"""
HTTP API for Raster Workbench
"""
