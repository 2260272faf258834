"""Liveness, readiness and dependency health endpoints."""
