"""Infrastructure layer for media app.

This package contains integrations with external systems:
- Storage backends that apply file visibility (S3/MinIO/R2, local disk)
- Metadata extraction (MIME type, file names)

Keep infrastructure concerns separate from business logic.
"""
