"""Data access helpers; each function works on a caller-supplied Session."""
