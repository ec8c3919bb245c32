"""Podcast Feed Resolver: find and parse a show's RSS feed from its profile URL."""

__version__ = "0.1.0"
