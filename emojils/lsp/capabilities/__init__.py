"""LSP capability plugins."""
