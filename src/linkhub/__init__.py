"""
LinkHub Backend - Professional Networking API

Profiles, connections, posts with likes/comments/shares, search,
notifications and analytics over a REST API.
"""

__version__ = "1.0.0"
