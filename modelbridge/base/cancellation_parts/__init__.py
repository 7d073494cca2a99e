"""Split cancellation parts. Import from ``modelbridge.base.cancellation`` instead."""
