"""
Services layer: data access that routes delegate to.

Service Inventory:
    - CollectionService: fetch every record of one model (read-only)
"""
