"""
Area session persistence service.

Stores recorded area-measurement sessions as per-user JSON blobs with a
denormalized session index, migrates legacy documents on read, and maps
blob store failures into a stable error taxonomy.
"""

__version__ = "0.1.0"
