"""markdown parsing and syntax tree model."""
