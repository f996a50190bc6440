"""Core EMF document model and serializer."""
