"""Text console front end for the Twenty-One engine."""
