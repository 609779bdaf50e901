# ABOUTME: Design Intel - normalized design/UX intelligence bundles
# ABOUTME: Extraction → bundling → validation of the design knowledge base

__version__ = "0.1.0"
