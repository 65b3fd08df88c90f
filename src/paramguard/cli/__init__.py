"""Command-line interface for ParamGuard."""
