"""Services built on top of the GitHub client."""
