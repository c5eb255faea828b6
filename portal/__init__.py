"""Portal — vacation entitlement, validation and conflict engine."""
