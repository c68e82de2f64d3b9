"""Markdown front matter, event stream and structural extraction."""
