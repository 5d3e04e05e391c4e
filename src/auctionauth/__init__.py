"""auctionauth - student identity and session lifecycle for the course-auction platform."""

__version__ = "0.1.0"
