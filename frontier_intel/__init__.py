"""Guild-scoped intel storage for an EVE Frontier Discord bot."""
