"""Business logic layer for media app.

This package contains the media upload workflow: collecting the
source file and upload options, persisting the media record and
writing the file to its disk.

All business logic should be implemented here, separate from
models (data layer) and infrastructure (external systems).
"""
