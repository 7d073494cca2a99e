"""One Protocol per module; ``modelbridge.base.interfaces`` re-exports them."""
