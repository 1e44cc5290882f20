"""Web server and frontend."""
