"""Conversion services: element model, ring assembly, feature conversion."""
