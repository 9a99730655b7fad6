"""
Placement Portal
Campus placement backend over a dual-backend record store.

Architecture:
- MongoDB: live document storage with server-side $lookup joins
- In-memory: lock-guarded fallback that emulates the same joins
"""

__version__ = "1.0.0"
