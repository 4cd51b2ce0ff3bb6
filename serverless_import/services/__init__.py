"""Services built on the shared infrastructure."""
