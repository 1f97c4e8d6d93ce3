"""Smoke runner that exercises a running nullsafe service over HTTP."""
