"""Sample extensions for pointsdispatch."""
