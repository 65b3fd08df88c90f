"""Constant tables shared across ParamGuard modules."""
