"""Adapters connecting emfpy to other libraries."""
