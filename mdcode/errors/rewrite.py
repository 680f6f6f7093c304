class RewriteError(ValueError):
    """Edits handed to the rewriter are unordered, overlapping or out of bounds."""
