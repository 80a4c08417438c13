"""Concrete designs. Each subpackage registers itself when imported."""
