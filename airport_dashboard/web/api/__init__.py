"""API routers for the dashboard web server."""
