"""Application ports."""
