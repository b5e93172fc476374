"""
Pydantic schemas: the API contract.

Resource schemas (camper.py, campsite.py) double as field allowlists for the
serializers; common.py holds the error and health bodies.
"""
