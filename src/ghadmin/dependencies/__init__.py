"""FastAPI dependencies for ghadmin."""
