"""subpath-serve - serve files by matching the end of their path."""
