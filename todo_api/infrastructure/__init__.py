"""Infrastructure: persistence and storage exceptions."""
