"""Rental tenancy service."""
