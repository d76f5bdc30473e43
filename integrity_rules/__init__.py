"""Selection rules, rule trees and report helpers for file integrity checking."""

__version__ = "0.1.0"