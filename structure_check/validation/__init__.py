"""Checklist types, evaluation, reporting, and the validation runner."""
