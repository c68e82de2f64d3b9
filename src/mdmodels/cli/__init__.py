"""Command line interface for mdmodels."""
