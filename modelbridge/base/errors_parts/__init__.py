"""Split error taxonomy parts. Import from ``modelbridge.base.errors`` instead."""
