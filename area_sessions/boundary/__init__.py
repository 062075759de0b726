"""
Boundary layer for external system integrations.

Handles all interactions with the blob store holding session documents.
Provides the store protocol, its S3 and local implementations, and the
persisted path layout.
"""
