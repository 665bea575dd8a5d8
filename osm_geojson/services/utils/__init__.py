"""Shared GeoJSON and thread pool helpers."""
