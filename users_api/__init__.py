"""Users API: read and update the caller's profile."""
