"""anchor infrastructure layer: AST parsing and configuration files."""
