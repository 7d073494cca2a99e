"""Core building blocks: data model, contracts, errors, cancellation, logging."""
