"""Task Tracker: projects and tasks behind session or token authentication with role-based access."""
