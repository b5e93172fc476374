"""
Camp API Backend: API Routes Package
=====================================

Route Inventory:
    - collections.py:  GET /api/<version>/<collection>  (one per registry entry)
    - health.py:       GET /health                      (service health check)

Routes stay thin: they resolve a session, call the collection service and
hand the records to the registered serializer.
"""
