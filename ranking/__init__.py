"""Deterministic ranking stages: redact → normalize → skills → similarity → score → rank."""
