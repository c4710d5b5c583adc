"""Data subpackage - generated price sheets."""
