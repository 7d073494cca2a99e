"""Split data model parts. Import from ``modelbridge.base.models`` instead."""
