"""Path confinement, file store and search engine for the vault."""
