"""Live browser scenarios against the travel-booking site."""
