"""HostelHub API."""
