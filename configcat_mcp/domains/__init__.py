"""
Domain Endpoints

Each domain module contains the endpoint descriptors of one API.
Descriptors are data: adding or removing an API is a single-file operation.

To add a new domain:
1. Create domains/newdomain.py with a NEWDOMAIN_ENDPOINTS list
2. Import it in endpoints.py and add it to DEFAULT_ENDPOINTS
"""

from .configcat import CONFIGCAT_ENDPOINTS

__all__ = [
    "CONFIGCAT_ENDPOINTS",
]
