"""Server-rendered HTML pages for the public article views."""
