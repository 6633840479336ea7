class InvalidArgument(ValueError):
    """Raised when a quadrature routine or rule receives an unusable argument."""
