"""Host metric collection."""
