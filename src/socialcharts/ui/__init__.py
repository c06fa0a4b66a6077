"""Presentation helpers and the web app for rendered charts."""
