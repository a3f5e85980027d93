"""
In-memory flight dataset: domain models, ingestion and network index
"""
