"""Wire schemas for the group manager routes."""
