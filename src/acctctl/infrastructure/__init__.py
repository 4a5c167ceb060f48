"""Infrastructure layer — state holders the services read and write."""
