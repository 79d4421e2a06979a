"""Swag Labs end-to-end suite."""
